"""Custom exceptions for the transportation solver library."""

from __future__ import annotations


class TransportSolverError(Exception):
    """Base exception for all transportation solver errors.

    All custom exceptions in the transport_solver package inherit from this class,
    allowing users to catch all solver-related errors with a single except clause.

    Example:
        try:
            result = solve_vogel_approximation(problem)
        except TransportSolverError as e:
            print(f"Solver error: {e}")
    """


class InvalidProblemError(TransportSolverError):
    """Raised when a problem definition is invalid or malformed.

    This includes:
    - Origin/destination name counts that differ from supply/demand lengths
    - Ragged cost matrices (row lengths differ from the number of destinations)
    - Negative supply or demand quantities
    - Non-numeric entries and malformed JSON input

    Example:
        InvalidProblemError("Cost row 1 has 3 entries, expected 2 (one per destination)")
    """


class ProblemUnbalancedError(InvalidProblemError):
    """Raised when total supply differs from total demand.

    The heuristics only handle balanced problems; no dummy origin or destination
    is added. The error is raised before any allocation work begins and carries
    both totals so callers can explain the mismatch.

    Example:
        ProblemUnbalancedError(total_supply=10.0, total_demand=11.0)
    """

    def __init__(self, total_supply: float, total_demand: float, message: str | None = None):
        """Initialize with the two computed totals."""
        if message is None:
            message = (
                f"Problem is unbalanced: total supply {total_supply:g} != "
                f"total demand {total_demand:g}."
            )
        super().__init__(message)
        self.total_supply = total_supply
        self.total_demand = total_demand


class SolverConfigurationError(TransportSolverError):
    """Raised when solver configuration or options are invalid.

    This includes:
    - Negative balance tolerance
    - Unknown construction method names

    Example:
        SolverConfigurationError("Unknown method 'stepping_stone'")
    """
