"""
Aggregator: folds parsed records into one accumulator per region.

Only records for the two target years are kept. The first accepted record for
a region creates its accumulator with both values at 0; later records for the
same region and year overwrite the earlier value.
"""

from __future__ import annotations

from typing import Dict

from popgrowth.domain.models import ParsedRecord, RegionAccumulator
from popgrowth.utils.logging import get_logger

log = get_logger(__name__)


class RegionAggregator:
    """
    Mapping of region name -> RegionAccumulator, in first-seen order.
    """

    def __init__(self, year_a: int, year_b: int, skip_invalid: bool = False) -> None:
        if year_a == year_b:
            raise ValueError(f"target years must differ (both are {year_a})")
        self.year_a = year_a
        self.year_b = year_b
        self.skip_invalid = skip_invalid
        self.accepted = 0
        self._accumulators: Dict[str, RegionAccumulator] = {}

    @property
    def accumulators(self) -> Dict[str, RegionAccumulator]:
        return self._accumulators

    def accepts(self, record: ParsedRecord) -> bool:
        if record.year not in (self.year_a, self.year_b):
            return False
        if self.skip_invalid and record.value is None:
            log.debug(
                "Skipping non-numeric value",
                extra={"region": record.region, "year": record.year},
            )
            return False
        return True

    def get_or_create(self, region: str) -> RegionAccumulator:
        accumulator = self._accumulators.get(region)
        if accumulator is None:
            accumulator = RegionAccumulator()
            self._accumulators[region] = accumulator
        return accumulator

    def add(self, record: ParsedRecord) -> bool:
        """
        Fold one record into the map. Returns whether the record was accepted.
        """
        if not self.accepts(record):
            return False

        accumulator = self.get_or_create(record.region)
        if record.year == self.year_a:
            accumulator.value_at_year_a = record.value
        elif record.year == self.year_b:
            accumulator.value_at_year_b = record.value
        self.accepted += 1
        return True

    def __len__(self) -> int:
        return len(self._accumulators)


__all__ = ["RegionAggregator"]
