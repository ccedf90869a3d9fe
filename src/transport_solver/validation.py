"""Supply/demand balance check applied before every construction.

The heuristics only build allocations for balanced problems. Comparison is
exact unless the caller opts into a tolerance, so a problem whose totals differ
by floating-point drift is rejected; callers working with decimals should round
their inputs first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .exceptions import ProblemUnbalancedError

logger = logging.getLogger(__name__)


def validate_balance(
    supply: Sequence[float],
    demand: Sequence[float],
    tolerance: float = 0.0,
) -> None:
    """Raise ProblemUnbalancedError unless total supply equals total demand.

    Args:
        supply: Units available at each origin.
        demand: Units required at each destination.
        tolerance: Maximum allowed |total supply - total demand|. The default 0.0
                   demands exact equality.

    Raises:
        ProblemUnbalancedError: If the totals differ. The exception carries
            total_supply and total_demand.
    """
    total_supply = sum(supply)
    total_demand = sum(demand)

    if tolerance > 0:
        balanced = abs(total_supply - total_demand) <= tolerance
    else:
        balanced = total_supply == total_demand

    if not balanced:
        logger.warning(
            "Rejected unbalanced problem",
            extra={"total_supply": total_supply, "total_demand": total_demand},
        )
        raise ProblemUnbalancedError(total_supply=total_supply, total_demand=total_demand)
