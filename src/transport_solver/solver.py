"""Public solver entrypoints."""

from __future__ import annotations

from pathlib import Path

from .construction import InitialSolutionConstructor
from .data import MINIMUM_COST, NORTHWEST_CORNER, VOGEL, SolverOptions, TransportProblem, TransportResult
from .exceptions import SolverConfigurationError
from .io import load_problem as load_problem_file
from .io import save_result as save_result_file
from .minimum_cost import MinimumCostConstructor
from .northwest_corner import NorthwestCornerConstructor
from .vogel import VogelConstructor

CONSTRUCTORS: dict[str, type[InitialSolutionConstructor]] = {
    NORTHWEST_CORNER: NorthwestCornerConstructor,
    MINIMUM_COST: MinimumCostConstructor,
    VOGEL: VogelConstructor,
}


def solve_northwest_corner(
    problem: TransportProblem,
    options: SolverOptions | None = None,
) -> TransportResult:
    """Build an initial solution with the Northwest Corner rule.

    Costs are ignored while allocating; they only enter the reported total.

    Args:
        problem: Balanced transportation problem.
        options: Solver configuration options. If None, uses defaults.

    Returns:
        TransportResult with the allocation, its total cost and the step narration.

    Raises:
        ProblemUnbalancedError: If total supply differs from total demand.

    Examples:
        >>> from transport_solver import build_problem, solve_northwest_corner
        >>> problem = build_problem([20, 30], [25, 25], [[5, 8], [7, 6]])
        >>> result = solve_northwest_corner(problem)
        >>> result.allocation
        [[20.0, 0.0], [5.0, 25.0]]
        >>> result.total_cost
        285.0
    """
    # Instantiate a fresh constructor each call to avoid cross-run state sharing.
    return NorthwestCornerConstructor(problem, options=options).solve()


def solve_minimum_cost(
    problem: TransportProblem,
    options: SolverOptions | None = None,
) -> TransportResult:
    """Build an initial solution by always shipping on the cheapest open cell.

    Ties are broken in row-major order: the first cheapest cell found wins.

    Returns:
        TransportResult with the allocation, its total cost and the step narration.

    Raises:
        ProblemUnbalancedError: If total supply differs from total demand.
    """
    return MinimumCostConstructor(problem, options=options).solve()


def solve_vogel_approximation(
    problem: TransportProblem,
    options: SolverOptions | None = None,
) -> TransportResult:
    """Build an initial solution with Vogel's Approximation Method.

    Returns:
        TransportResult with the allocation and its total cost. ``steps`` is None.

    Raises:
        ProblemUnbalancedError: If total supply differs from total demand.

    See Also:
        - vogel.line_penalty(): Penalty definition, including single-cell lines.
    """
    return VogelConstructor(problem, options=options).solve()


def solve_transport(
    problem: TransportProblem,
    method: str = VOGEL,
    options: SolverOptions | None = None,
) -> TransportResult:
    """Solve with the heuristic named by ``method``.

    Args:
        problem: Balanced transportation problem.
        method: 'northwest_corner', 'minimum_cost' or 'vogel' (default).
        options: Solver configuration options.

    Raises:
        SolverConfigurationError: If the method name is unknown.
        ProblemUnbalancedError: If total supply differs from total demand.
    """
    try:
        constructor = CONSTRUCTORS[method]
    except KeyError:
        raise SolverConfigurationError(
            f"Unknown method '{method}'. Must be one of: {', '.join(sorted(CONSTRUCTORS))}."
        ) from None
    return constructor(problem, options=options).solve()


def load_problem(path: str | Path) -> TransportProblem:
    """Load a transportation problem from a JSON file.

    Raises:
        FileNotFoundError: If file does not exist.
        InvalidProblemError: If JSON is malformed or problem is invalid.

    See Also:
        - save_result(): Save a solution to JSON
        - build_problem(): Construct a problem from in-memory lists
    """
    return load_problem_file(path)


def save_result(path: str | Path, result: TransportResult) -> None:
    """Save a construction result to a JSON file.

    Raises:
        OSError: If file cannot be written.
    """
    save_result_file(path, result)
