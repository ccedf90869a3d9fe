"""File I/O helpers for transportation problems."""

from __future__ import annotations

import json
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

from .data import TransportProblem, TransportResult, build_problem
from .exceptions import InvalidProblemError


def _tolerance(payload: MutableMapping[str, Any]) -> float:
    raw = payload.get("tolerance")
    if raw is None:
        return 0.0
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidProblemError(
            f"Invalid problem format: 'tolerance' must be a number, got {raw!r}."
        ) from exc


def load_problem(path: str | Path) -> TransportProblem:
    """Load a transportation instance from a JSON file."""
    with Path(path).open("r", encoding="utf-8") as fh:
        try:
            payload: MutableMapping[str, Any] = json.load(fh)
        except json.JSONDecodeError as exc:
            raise InvalidProblemError(f"Invalid problem file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidProblemError(
            f"Invalid problem format: expected a JSON object, got {type(payload).__name__}."
        )
    supply = payload.get("supply")
    demand = payload.get("demand")
    costs = payload.get("costs")
    if costs is None:
        costs = payload.get("cost")
    if not isinstance(supply, list) or not isinstance(demand, list) or not isinstance(costs, list):
        raise InvalidProblemError(
            "Invalid problem format: JSON must include 'supply', 'demand' and 'costs' (or 'cost') arrays. "
            f"Got supply type: {type(supply).__name__}, demand type: {type(demand).__name__}, "
            f"costs type: {type(costs).__name__}"
        )
    # Defer to the core builder so validation rules remain centralized in one place.
    return build_problem(
        supply=supply,
        demand=demand,
        cost=costs,
        origins=payload.get("origins"),
        destinations=payload.get("destinations"),
        tolerance=_tolerance(payload),
    )


def save_result(path: str | Path, result: TransportResult) -> None:
    """Persist a construction result to JSON."""
    data: dict[str, Any] = {
        "method": result.method,
        "total_cost": result.total_cost,
        "origins": result.origin_names,
        "destinations": result.destination_names,
        "allocation": result.allocation,
        "shipments": [
            {
                "origin": result.origin_names[i],
                "destination": result.destination_names[j],
                "quantity": result.allocation[i][j],
                "unit_cost": result.cost[i][j],
            }
            for i, j in result.occupied_cells()
        ],
    }
    if result.steps is not None:
        data["steps"] = result.steps
    with Path(path).open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2, ensure_ascii=False)
