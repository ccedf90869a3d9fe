"""Minimum Cost (least-cost cell) method for initial transportation solutions."""

from __future__ import annotations

import math

from .construction import InitialSolutionConstructor
from .data import MINIMUM_COST


class MinimumCostConstructor(InitialSolutionConstructor):
    """Repeatedly ship on the cheapest cell whose row and column are still open.

    Cells are scanned in row-major order and only a strictly smaller cost
    replaces the current best, so the first cheapest cell wins ties. Every round
    zeroes at least one row or column, which bounds the number of rounds by
    m + n - 1; each round rescans the whole table.
    """

    method = MINIMUM_COST

    def _cheapest_open_cell(self) -> tuple[int, int] | None:
        best_cost = math.inf
        best: tuple[int, int] | None = None
        for i in range(self.m):
            if self.supply[i] == 0:
                continue
            for j in range(self.n):
                if self.demand[j] == 0:
                    continue
                if self.cost[i][j] < best_cost:
                    best_cost = self.cost[i][j]
                    best = (i, j)
        return best

    def _allocate(self) -> None:
        origins = self.problem.origin_names
        destinations = self.problem.destination_names

        while True:
            cell = self._cheapest_open_cell()
            if cell is None:
                break
            i, j = cell
            self.assign(i, j)

            # A zeroed line drops out of the next scan, so a simultaneous zero
            # leaves the other line as a harmless zero-quantity candidate.
            if self.supply[i] == 0 and self.demand[j] == 0:
                self.trace.event(
                    f"Supply of {origins[i]} and demand of {destinations[j]} both reached 0. "
                    f"Only one of them is crossed out and the other keeps a visible 0; "
                    f"continuing with the next minimum-cost cell."
                )
            elif self.supply[i] == 0:
                self.trace.event(f"Supply of {origins[i]} is exhausted. Crossing out its row.")
            elif self.demand[j] == 0:
                self.trace.event(f"Demand of {destinations[j]} is satisfied. Crossing out its column.")
