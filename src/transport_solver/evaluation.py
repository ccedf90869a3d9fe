"""Objective evaluation for transportation allocations."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def total_cost(allocation: Sequence[Sequence[float]], cost: Sequence[Sequence[float]]) -> float:
    """Return the shipping cost of an allocation (sum of allocation[i][j] * cost[i][j]).

    Both matrices must have the same m x n shape; a mismatch raises ValueError.
    """
    shipped = np.asarray(allocation, dtype=float)
    unit_costs = np.asarray(cost, dtype=float)
    if shipped.shape != unit_costs.shape:
        raise ValueError(
            f"Allocation shape {shipped.shape} does not match cost shape {unit_costs.shape}"
        )
    return float(np.sum(shipped * unit_costs))
