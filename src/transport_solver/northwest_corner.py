"""Northwest Corner rule for initial transportation solutions."""

from __future__ import annotations

from .construction import InitialSolutionConstructor
from .data import NORTHWEST_CORNER


class NorthwestCornerConstructor(InitialSolutionConstructor):
    """Sweep the table from the top-left cell, ignoring costs.

    A cursor (i, j) starts at (0, 0). Each step ships as much as possible on the
    cell under the cursor, then moves down when the origin is exhausted or right
    when the destination is satisfied. When both reach zero together the cursor
    only moves right and the row keeps a visible zero, so later rows are never
    skipped. At most m + n - 1 cells are filled and no cell is visited twice.
    """

    method = NORTHWEST_CORNER

    def _allocate(self) -> None:
        origins = self.problem.origin_names
        destinations = self.problem.destination_names
        i = 0
        j = 0

        while i < self.m and j < self.n:
            if self.supply[i] == 0:
                i += 1
                continue
            if self.demand[j] == 0:
                j += 1
                continue

            self.assign(i, j)

            if self.supply[i] == 0 and self.demand[j] == 0:
                self.trace.event(
                    f"Supply of {origins[i]} and demand of {destinations[j]} reached 0 "
                    f"simultaneously. Moving to the next column and keeping the 0 in the row."
                )
                j += 1
            elif self.supply[i] == 0:
                self.trace.event(f"Supply of {origins[i]} is exhausted. Moving down to the next row.")
                i += 1
            elif self.demand[j] == 0:
                self.trace.event(
                    f"Demand of {destinations[j]} is satisfied. Moving right to the next column."
                )
                j += 1
