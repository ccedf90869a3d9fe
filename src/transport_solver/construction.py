"""Shared driver for initial basic feasible solution constructors.

Each heuristic subclasses InitialSolutionConstructor and implements
``_allocate``. The base class copies the problem data into private working
lists, checks the supply/demand balance, evaluates the cost and logs the run,
so the three heuristics only differ in how they pick the next cell.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

from .data import SolverOptions, TransportProblem, TransportResult, make_result
from .evaluation import total_cost
from .trace import TraceRecorder
from .validation import validate_balance


class InitialSolutionConstructor(ABC):
    """Base class for the Northwest Corner, Minimum Cost and Vogel constructors.

    Attributes:
        problem: The TransportProblem being solved (never mutated).
        options: Solver configuration.
        supply: Working copy of the origin supplies, consumed during allocation.
        demand: Working copy of the destination demands, consumed during allocation.
        cost: Working copy of the unit cost matrix.
        allocation: m x n shipped quantities, filled by ``_allocate``.
        trace: Step narration, or None for constructors that do not narrate.

    Note:
        Instances are single-use. Use the solve_* functions in ``solver`` rather
        than instantiating constructors directly.
    """

    method: str = ""
    narrates: bool = True

    def __init__(self, problem: TransportProblem, options: SolverOptions | None = None):
        self.problem = problem
        self.options = options if options is not None else SolverOptions()
        self.logger = logging.getLogger(self.__class__.__module__)

        m, n = problem.shape
        self.m = m
        self.n = n
        self.supply = list(problem.supply)
        self.demand = list(problem.demand)
        self.cost = [list(row) for row in problem.cost]
        self.allocation = [[0.0] * n for _ in range(m)]
        self.trace: TraceRecorder | None = None
        if self.narrates:
            self.trace = TraceRecorder(enabled=self.options.record_steps, logger=self.logger)

    @abstractmethod
    def _allocate(self) -> None:
        """Fill ``self.allocation`` by consuming ``self.supply`` and ``self.demand``."""

    def assign(self, i: int, j: int) -> float:
        """Ship min(supply[i], demand[j]) on cell (i, j) and return the quantity."""
        quantity = min(self.supply[i], self.demand[j])
        self.allocation[i][j] = quantity
        supply_before = self.supply[i]
        demand_before = self.demand[j]
        self.supply[i] -= quantity
        self.demand[j] -= quantity
        if self.trace is not None:
            self.trace.assignment(
                quantity,
                self.problem.origin_names[i],
                self.problem.destination_names[j],
                self.cost[i][j],
                supply_before,
                self.supply[i],
                demand_before,
                self.demand[j],
            )
        elif self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "Assigned cell",
                extra={"row": i, "column": j, "quantity": quantity, "unit_cost": self.cost[i][j]},
            )
        return quantity

    def solve(self) -> TransportResult:
        tolerance = self.options.resolve_tolerance(self.problem)
        validate_balance(self.problem.supply, self.problem.demand, tolerance=tolerance)

        start_time = time.time()
        self.logger.info(
            "Starting initial solution construction",
            extra={
                "method": self.method,
                "origins": self.m,
                "destinations": self.n,
                "total_supply": self.problem.total_supply,
                "total_demand": self.problem.total_demand,
            },
        )

        self._allocate()

        total = total_cost(self.allocation, self.cost)
        occupied = sum(1 for row in self.allocation for quantity in row if quantity != 0)
        if occupied < self.m + self.n - 1:
            self.logger.warning(
                "Degenerate initial solution",
                extra={"method": self.method, "occupied": occupied, "basis_size": self.m + self.n - 1},
            )

        self.logger.info(
            "Initial solution constructed",
            extra={
                "method": self.method,
                "total_cost": total,
                "occupied": occupied,
                "elapsed_ms": (time.time() - start_time) * 1000,
            },
        )

        steps = self.trace.lines() if self.trace is not None else None
        return make_result(self.problem, self.allocation, total, self.method, steps)
