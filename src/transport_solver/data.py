"""Core data structures for balanced transportation problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidProblemError, SolverConfigurationError

NORTHWEST_CORNER = "northwest_corner"
MINIMUM_COST = "minimum_cost"
VOGEL = "vogel"


@dataclass(frozen=True)
class TransportProblem:
    """Encapsulates a balanced transportation problem.

    Cell (i, j) of the cost matrix is the unit cost of shipping from origin i to
    destination j. The constructors never mutate a problem; they copy supply and
    demand into local working lists before allocating.

    Attributes:
        origin_names: Label for each supply point (length m).
        destination_names: Label for each demand point (length n).
        supply: Units available at each origin.
        demand: Units required at each destination.
        cost: m x n unit shipping costs.
        tolerance: Allowed |total supply - total demand| (default: 0.0, exact equality).

    Examples:
        >>> problem = TransportProblem(
        ...     origin_names=("F1", "F2"),
        ...     destination_names=("W1", "W2"),
        ...     supply=(20.0, 30.0),
        ...     demand=(25.0, 25.0),
        ...     cost=((5.0, 8.0), (7.0, 6.0)),
        ... )
        >>> problem.shape
        (2, 2)

    See Also:
        - build_problem(): Construct from raw user data with defaults and coercion.
        - solve_vogel_approximation(): Solve the problem.
    """

    origin_names: tuple[str, ...]
    destination_names: tuple[str, ...]
    supply: tuple[float, ...]
    demand: tuple[float, ...]
    cost: tuple[tuple[float, ...], ...]
    tolerance: float = 0.0

    @property
    def shape(self) -> tuple[int, int]:
        return len(self.supply), len(self.demand)

    @property
    def total_supply(self) -> float:
        return sum(self.supply)

    @property
    def total_demand(self) -> float:
        return sum(self.demand)


@dataclass
class TransportResult:
    """Represents the output of an initial-solution construction.

    Attributes:
        allocation: m x n shipped quantities; row sums match supply, column sums match demand.
        total_cost: Sum of allocation[i][j] * cost[i][j].
        origin_names: Origin labels copied from the problem.
        destination_names: Destination labels copied from the problem.
        cost: Unit cost matrix copied from the problem.
        method: Heuristic that built the allocation ('northwest_corner', 'minimum_cost', 'vogel').
        steps: Narration of the construction for Northwest Corner and Minimum Cost.
               None for Vogel's approximation, which does not narrate.

    Examples:
        >>> result = solve_northwest_corner(problem)
        >>> result.total_cost
        285.0
        >>> result.occupied_cells()
        [(0, 0), (1, 0), (1, 1)]
    """

    allocation: list[list[float]]
    total_cost: float
    origin_names: list[str]
    destination_names: list[str]
    cost: list[list[float]]
    method: str
    steps: list[str] | None = None

    def occupied_cells(self) -> list[tuple[int, int]]:
        """Return (row, column) indices of non-zero cells in row-major order."""
        return [
            (i, j)
            for i, row in enumerate(self.allocation)
            for j, quantity in enumerate(row)
            if quantity != 0
        ]

    def shipments(self) -> dict[tuple[str, str], float]:
        """Map (origin, destination) name pairs to non-zero shipped quantities."""
        return {
            (self.origin_names[i], self.destination_names[j]): self.allocation[i][j]
            for i, j in self.occupied_cells()
        }


@dataclass
class SolverOptions:
    """Configuration options shared by the three constructors.

    Attributes:
        tolerance: Balance tolerance overriding TransportProblem.tolerance when set.
                   None (default) keeps the problem's own tolerance. 0.0 forces exact equality.
        record_steps: Produce the step narration for Northwest Corner and Minimum Cost
                      (default: True). When False those methods return an empty step list.
                      Vogel's approximation never narrates.

    Examples:
        >>> options = SolverOptions(tolerance=1e-9)
        >>> result = solve_minimum_cost(problem, options=options)
    """

    tolerance: float | None = None
    record_steps: bool = True

    def __post_init__(self) -> None:
        if self.tolerance is not None and (self.tolerance < 0 or math.isnan(self.tolerance)):
            raise SolverConfigurationError(
                f"Tolerance must be non-negative, got {self.tolerance}. "
                f"Use 0.0 for exact supply/demand balance."
            )

    def resolve_tolerance(self, problem: TransportProblem) -> float:
        return problem.tolerance if self.tolerance is None else self.tolerance


def _coerce_quantity(value: Any, label: str) -> float:
    # Empty form fields arrive as None or "" and count as zero.
    if value is None or (isinstance(value, str) and not value.strip()):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidProblemError(f"{label} must be numeric, got {value!r}.") from exc
    if not math.isfinite(number):
        raise InvalidProblemError(f"{label} must be a finite number, got {number}.")
    return number


def _default_names(raw: Iterable[Any] | None, count: int, prefix: str) -> tuple[str, ...]:
    supplied = list(raw) if raw is not None else []
    if len(supplied) not in (0, count):
        raise InvalidProblemError(
            f"Expected {count} {prefix.lower()} names, got {len(supplied)}. "
            f"Provide one name per {prefix.lower()} or omit them for defaults."
        )
    names = []
    for idx in range(count):
        name = supplied[idx] if supplied else None
        text = str(name).strip() if name is not None else ""
        names.append(text if text else f"{prefix} {idx + 1}")
    return tuple(names)


def build_problem(
    supply: Sequence[Any],
    demand: Sequence[Any],
    cost: Sequence[Sequence[Any]],
    origins: Iterable[Any] | None = None,
    destinations: Iterable[Any] | None = None,
    tolerance: float = 0.0,
) -> TransportProblem:
    """Factory helper used by the IO layer to assemble a TransportProblem.

    Blank numeric entries become 0.0 and blank names become "Origin k" /
    "Destination k". Shape problems raise InvalidProblemError here; the
    supply/demand balance is checked later by each constructor.
    """
    supply_values = tuple(
        _coerce_quantity(value, f"Supply of origin {idx + 1}") for idx, value in enumerate(supply)
    )
    demand_values = tuple(
        _coerce_quantity(value, f"Demand of destination {idx + 1}")
        for idx, value in enumerate(demand)
    )
    if not supply_values:
        raise InvalidProblemError("Problem must have at least one origin.")
    if not demand_values:
        raise InvalidProblemError("Problem must have at least one destination.")

    for label, values in (("Supply", supply_values), ("Demand", demand_values)):
        for idx, value in enumerate(values):
            if value < 0:
                raise InvalidProblemError(
                    f"{label} entry {idx + 1} is negative ({value:g}). "
                    f"Quantities must be non-negative."
                )

    rows = list(cost)
    if len(rows) != len(supply_values):
        raise InvalidProblemError(
            f"Cost matrix has {len(rows)} rows, expected {len(supply_values)} (one per origin)."
        )
    cost_matrix: list[tuple[float, ...]] = []
    for i, row in enumerate(rows):
        row_values = list(row)
        if len(row_values) != len(demand_values):
            raise InvalidProblemError(
                f"Cost row {i + 1} has {len(row_values)} entries, expected "
                f"{len(demand_values)} (one per destination)."
            )
        cost_matrix.append(
            tuple(
                _coerce_quantity(value, f"Cost ({i + 1}, {j + 1})")
                for j, value in enumerate(row_values)
            )
        )

    tolerance = float(tolerance)
    if tolerance < 0:
        raise InvalidProblemError(f"Tolerance must be non-negative, got {tolerance}.")

    return TransportProblem(
        origin_names=_default_names(origins, len(supply_values), "Origin"),
        destination_names=_default_names(destinations, len(demand_values), "Destination"),
        supply=supply_values,
        demand=demand_values,
        cost=tuple(cost_matrix),
        tolerance=tolerance,
    )


def make_result(
    problem: TransportProblem,
    allocation: list[list[float]],
    total: float,
    method: str,
    steps: list[str] | None = None,
) -> TransportResult:
    return TransportResult(
        allocation=allocation,
        total_cost=total,
        origin_names=list(problem.origin_names),
        destination_names=list(problem.destination_names),
        cost=[list(row) for row in problem.cost],
        method=method,
        steps=steps,
    )
