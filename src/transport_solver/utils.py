"""Utility functions for checking and summarising transportation allocations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .data import TransportProblem, TransportResult
from .evaluation import total_cost


@dataclass
class ValidationResult:
    """Results from validating an allocation against its problem.

    Attributes:
        is_valid: True if the allocation satisfies all constraints.
        errors: List of validation error messages (empty if valid).
        row_residuals: supply[i] minus the quantity shipped from origin i.
        column_residuals: demand[j] minus the quantity shipped to destination j.
        negative_cells: (row, column) cells holding a negative quantity.
    """

    is_valid: bool
    errors: list[str]
    row_residuals: list[float]
    column_residuals: list[float]
    negative_cells: list[tuple[int, int]]


@dataclass
class BasisSummary:
    """Occupied-cell count of an allocation compared with a full basis.

    Attributes:
        occupied: Number of cells with a non-zero quantity.
        basis_size: m + n - 1, the number of basic cells of a non-degenerate solution.
        is_degenerate: True when fewer than basis_size cells are occupied.
    """

    occupied: int
    basis_size: int
    is_degenerate: bool


def validate_allocation(
    problem: TransportProblem,
    allocation: Sequence[Sequence[float]],
    tolerance: float = 1e-9,
) -> ValidationResult:
    """Validate that an allocation ships every supply and meets every demand.

    Checks:
    - Row sums equal supply[i] for every origin
    - Column sums equal demand[j] for every destination
    - No cell holds a negative quantity

    Args:
        problem: Problem the allocation was built for.
        allocation: m x n shipped quantities (e.g. ``result.allocation``).
        tolerance: Numerical tolerance for residuals (default: 1e-9).
    """
    errors: list[str] = []
    m, n = problem.shape

    if len(allocation) != m or any(len(row) != n for row in allocation):
        return ValidationResult(
            is_valid=False,
            errors=[f"Allocation shape does not match problem shape {m}x{n}"],
            row_residuals=[],
            column_residuals=[],
            negative_cells=[],
        )

    row_residuals = [problem.supply[i] - sum(allocation[i]) for i in range(m)]
    column_residuals = [
        problem.demand[j] - sum(allocation[i][j] for i in range(m)) for j in range(n)
    ]
    negative_cells = [
        (i, j) for i in range(m) for j in range(n) if allocation[i][j] < -tolerance
    ]

    for i, residual in enumerate(row_residuals):
        if abs(residual) > tolerance:
            errors.append(
                f"Origin {problem.origin_names[i]}: ships {problem.supply[i] - residual:g} "
                f"of {problem.supply[i]:g} units"
            )
    for j, residual in enumerate(column_residuals):
        if abs(residual) > tolerance:
            errors.append(
                f"Destination {problem.destination_names[j]}: receives "
                f"{problem.demand[j] - residual:g} of {problem.demand[j]:g} units"
            )
    for i, j in negative_cells:
        errors.append(f"Cell ({i}, {j}): negative quantity {allocation[i][j]:g}")

    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        row_residuals=row_residuals,
        column_residuals=column_residuals,
        negative_cells=negative_cells,
    )


def summarize_basis(result: TransportResult) -> BasisSummary:
    """Compare the number of occupied cells with m + n - 1.

    The heuristics never repair degeneracy; this only reports it.
    """
    basis_size = len(result.origin_names) + len(result.destination_names) - 1
    occupied = len(result.occupied_cells())
    return BasisSummary(
        occupied=occupied,
        basis_size=basis_size,
        is_degenerate=occupied < basis_size,
    )


def recompute_cost(result: TransportResult) -> float:
    """Recompute the total cost of a result from its allocation and cost matrix."""
    return total_cost(result.allocation, result.cost)
