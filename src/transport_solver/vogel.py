"""Vogel's Approximation Method for initial transportation solutions."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from .construction import InitialSolutionConstructor
from .data import VOGEL


def line_penalty(costs: Sequence[float]) -> float | None:
    """Return the Vogel penalty of a row or column restricted to its open cells.

    The penalty is the second-smallest cost minus the smallest one. A line with
    a single open cell is penalised by that cell's cost itself, and a line with
    no open cells has no penalty (None).
    """
    if not costs:
        return None
    if len(costs) == 1:
        return costs[0]
    smallest, second = sorted(costs)[:2]
    return second - smallest


class VogelConstructor(InitialSolutionConstructor):
    """Allocate by opportunity cost: serve the line that would lose most by waiting.

    Every row and column starts active, whatever its quantity. Each iteration
    computes the penalty of every active line over the active lines crossing it,
    picks the largest penalty (the row wins when the best row penalty is at least
    the best column penalty, and the first line wins among equals), then ships on
    the cheapest active cell of that line. Lines whose remaining quantity reaches
    exactly zero are deactivated, so the loop runs at most m + n - 1 times.

    This constructor does not narrate; iterations are logged at DEBUG level.
    """

    method = VOGEL
    narrates = False

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.row_active = [True] * self.m
        self.col_active = [True] * self.n

    def _row_penalties(self) -> list[float | None]:
        return [
            line_penalty([self.cost[i][j] for j in range(self.n) if self.col_active[j]])
            if self.row_active[i]
            else None
            for i in range(self.m)
        ]

    def _col_penalties(self) -> list[float | None]:
        return [
            line_penalty([self.cost[i][j] for i in range(self.m) if self.row_active[i]])
            if self.col_active[j]
            else None
            for j in range(self.n)
        ]

    @staticmethod
    def _first_max(penalties: list[float | None]) -> tuple[int, float]:
        best_index = -1
        best = -math.inf
        for idx, penalty in enumerate(penalties):
            if penalty is not None and penalty > best:
                best = penalty
                best_index = idx
        return best_index, best

    def _cheapest_in_row(self, i: int) -> int:
        best_cost = math.inf
        best_col = -1
        for j in range(self.n):
            if self.col_active[j] and self.cost[i][j] < best_cost:
                best_cost = self.cost[i][j]
                best_col = j
        return best_col

    def _cheapest_in_column(self, j: int) -> int:
        best_cost = math.inf
        best_row = -1
        for i in range(self.m):
            if self.row_active[i] and self.cost[i][j] < best_cost:
                best_cost = self.cost[i][j]
                best_row = i
        return best_row

    def _allocate(self) -> None:
        while any(self.row_active) and any(self.col_active):
            row_penalties = self._row_penalties()
            col_penalties = self._col_penalties()
            best_row, max_row = self._first_max(row_penalties)
            best_col, max_col = self._first_max(col_penalties)

            if best_row == -1 and best_col == -1:
                break

            if max_row >= max_col:
                i = best_row
                j = self._cheapest_in_row(i)
            else:
                j = best_col
                i = self._cheapest_in_column(j)

            if i == -1 or j == -1:
                break

            if self.logger.isEnabledFor(logging.DEBUG):
                self.logger.debug(
                    "Vogel iteration",
                    extra={
                        "row_penalties": row_penalties,
                        "column_penalties": col_penalties,
                        "selected": "row" if max_row >= max_col else "column",
                        "cell": (i, j),
                    },
                )

            self.assign(i, j)

            if self.supply[i] == 0:
                self.row_active[i] = False
            if self.demand[j] == 0:
                self.col_active[j] = False
