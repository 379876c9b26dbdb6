"""
Ranker: orders finalized regions by growth ratio, highest first.

Equal ratios keep first-seen order (the sort is stable) and nan ratios go
last, in first-seen order among themselves.
"""

from __future__ import annotations

import math
from typing import List, Mapping, Tuple

from popgrowth.domain.models import RankedRegion, RegionAccumulator


def _sort_key(ratio: float) -> Tuple[bool, float]:
    if math.isnan(ratio):
        return (True, 0.0)
    return (False, -ratio)


def rank(accumulators: Mapping[str, RegionAccumulator]) -> List[RankedRegion]:
    """
    Produce the ranking from a finalized accumulator map.

    Raises ValueError if an accumulator has not been finalized.
    """
    entries: List[RankedRegion] = []
    for region, accumulator in accumulators.items():
        if accumulator.ratio is None:
            raise ValueError(f"ratio for region {region!r} has not been computed")
        entries.append(
            RankedRegion(
                region=region,
                value_at_year_a=accumulator.value_at_year_a,
                value_at_year_b=accumulator.value_at_year_b,
                ratio=accumulator.ratio,
            )
        )
    return sorted(entries, key=lambda entry: _sort_key(entry.ratio))


__all__ = ["rank"]
