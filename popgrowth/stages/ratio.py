"""
Ratio calculator: derives each region's growth ratio once input is exhausted.

Division follows IEEE-754: x/0 is +/-inf, 0/0 and any not-a-number operand
give nan. Nothing here raises.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional

from popgrowth.domain.models import RegionAccumulator


def growth_ratio(value_a: Optional[int], value_b: Optional[int]) -> float:
    """
    Return value_b / value_a as a float.
    """
    if value_a is None or value_b is None:
        return math.nan
    if value_a == 0:
        if value_b == 0:
            return math.nan
        # Zero has no sign for ints, so the result takes the numerator's.
        return math.copysign(math.inf, value_b)
    return value_b / value_a


def finalize(accumulators: Mapping[str, RegionAccumulator]) -> None:
    """
    Set `ratio` on every accumulator in place.
    """
    for accumulator in accumulators.values():
        accumulator.ratio = growth_ratio(accumulator.value_at_year_a, accumulator.value_at_year_b)


__all__ = ["growth_ratio", "finalize"]
