"""Step narration for the Northwest Corner and Minimum Cost constructors."""

from __future__ import annotations

import logging


def format_quantity(value: float) -> str:
    """Render a quantity without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class TraceRecorder:
    """Collects one human-readable line per assignment and per exhaustion event.

    The trace is for display only; the allocation never depends on it. When
    ``enabled`` is False nothing is stored and ``steps`` stays empty, but lines
    are still forwarded to ``logger`` at DEBUG level if one is given.
    """

    def __init__(self, enabled: bool = True, logger: logging.Logger | None = None):
        self.enabled = enabled
        self.logger = logger
        self.steps: list[str] = []
        self.step_number = 1

    def _emit(self, line: str) -> None:
        if self.enabled:
            self.steps.append(line)
        if self.logger is not None and self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(line)

    def assignment(
        self,
        quantity: float,
        origin: str,
        destination: str,
        unit_cost: float,
        supply_before: float,
        supply_after: float,
        demand_before: float,
        demand_after: float,
    ) -> None:
        self._emit(
            f"Step {self.step_number}: assign {format_quantity(quantity)} units from "
            f"{origin} to {destination} (unit cost {format_quantity(unit_cost)}). "
            f"Supply {origin}: {format_quantity(supply_before)}→{format_quantity(supply_after)}, "
            f"Demand {destination}: {format_quantity(demand_before)}→{format_quantity(demand_after)}."
        )
        self.step_number += 1

    def event(self, message: str) -> None:
        self._emit(message)

    def lines(self) -> list[str]:
        return list(self.steps)
