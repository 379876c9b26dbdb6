from __future__ import annotations

import pytest

from popgrowth.domain.models import ParsedRecord
from popgrowth.stages.aggregator import RegionAggregator

YEAR_A = 2010
YEAR_B = 2015


def _record(year, region, value) -> ParsedRecord:
    return ParsedRecord(year=year, region=region, value=value)


def test_accumulates_both_years_per_region():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)
    aggregator.add(_record(2010, "Tokyo", 100))
    aggregator.add(_record(2015, "Tokyo", 300))

    tokyo = aggregator.accumulators["Tokyo"]
    assert tokyo.value_at_year_a == 100
    assert tokyo.value_at_year_b == 300
    assert tokyo.ratio is None
    assert len(aggregator) == 1


def test_other_years_are_ignored():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)

    assert aggregator.add(_record(2020, "Tokyo", 900)) is False
    assert aggregator.add(_record(None, "header", None)) is False
    assert aggregator.accumulators == {}
    assert aggregator.accepted == 0


def test_ignored_year_does_not_touch_existing_accumulator():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)
    aggregator.add(_record(2010, "Tokyo", 100))
    aggregator.add(_record(2020, "Tokyo", 900))

    tokyo = aggregator.accumulators["Tokyo"]
    assert (tokyo.value_at_year_a, tokyo.value_at_year_b) == (100, 0)


def test_first_record_creates_defaults():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)
    aggregator.add(_record(2015, "Akita", 80))

    akita = aggregator.accumulators["Akita"]
    assert akita.value_at_year_a == 0
    assert akita.value_at_year_b == 80


def test_last_write_wins_for_duplicate_region_year():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)
    aggregator.add(_record(2010, "Tokyo", 100))
    aggregator.add(_record(2010, "Tokyo", 150))

    assert aggregator.accumulators["Tokyo"].value_at_year_a == 150
    assert aggregator.accepted == 2


def test_first_seen_order_is_preserved():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)
    for region in ["Osaka", "Tokyo", "Akita"]:
        aggregator.add(_record(2010, region, 1))
    aggregator.add(_record(2015, "Osaka", 2))

    assert list(aggregator.accumulators) == ["Osaka", "Tokyo", "Akita"]


def test_non_numeric_value_is_kept_by_default():
    aggregator = RegionAggregator(YEAR_A, YEAR_B)
    aggregator.add(_record(2015, "Osaka", None))

    assert aggregator.accumulators["Osaka"].value_at_year_b is None


def test_skip_invalid_drops_non_numeric_values():
    aggregator = RegionAggregator(YEAR_A, YEAR_B, skip_invalid=True)

    assert aggregator.add(_record(2015, "Osaka", None)) is False
    assert "Osaka" not in aggregator.accumulators


def test_equal_target_years_are_rejected():
    with pytest.raises(ValueError, match="must differ"):
        RegionAggregator(2010, 2010)
