from __future__ import annotations

import io
import json
import math

import pytest
from rich.console import Console

from popgrowth.domain.models import RankedRegion, RankingResult
from popgrowth.reporter import (
    console_sink,
    format_number,
    print_table,
    ranking_json,
    render_line,
    render_lines,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3.0, "3"),
        (0.8, "0.8"),
        (0.0, "0"),
        (-2.0, "-2"),
        (1 / 3, "0.3333333333333333"),
        (100, "100"),
        (None, "NaN"),
        (math.nan, "NaN"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (1e21, "1e+21"),
        (1e20, "100000000000000000000"),
        (123.456, "123.456"),
        (1e-5, "0.00001"),
        (1e-6, "0.000001"),
        (1e-7, "1e-7"),
        (1 / 3e6, "3.3333333333333335e-7"),
        (-0.00025, "-0.00025"),
        (1.5e300, "1.5e+300"),
        (-0.0, "0"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def _ranking():
    return [
        RankedRegion(region="Tokyo", value_at_year_a=100, value_at_year_b=300, ratio=3.0),
        RankedRegion(region="Akita", value_at_year_a=100, value_at_year_b=80, ratio=0.8),
        RankedRegion(region="Osaka", value_at_year_a=0, value_at_year_b=None, ratio=math.nan),
    ]


def test_render_line_format():
    assert render_line(_ranking()[0]) == "Tokyo: 100=>300 growth-ratio:3"


def test_render_lines_keeps_order():
    assert render_lines(_ranking()) == [
        "Tokyo: 100=>300 growth-ratio:3",
        "Akita: 100=>80 growth-ratio:0.8",
        "Osaka: 0=>NaN growth-ratio:NaN",
    ]


def test_console_sink_writes_lines_verbatim():
    buffer = io.StringIO()
    sink = console_sink(Console(file=buffer, width=20, color_system=None))

    lines = [
        "[bold]Tokyo[/bold]: 100=>300 growth-ratio:3",
        "Town:smile:: 1=>2 growth-ratio:2",
        "Akita: 100=>80 growth-ratio:0.8",
    ]
    sink(lines)

    assert buffer.getvalue().splitlines() == lines


def test_ranking_json_renders_non_finite_ratios_as_strings():
    result = RankingResult(year_a=2010, year_b=2015, lines_read=7, records_accepted=6, ranking=_ranking())

    payload = json.loads(ranking_json(result))

    assert payload["year_a"] == 2010
    assert [row["rank"] for row in payload["ranking"]] == [1, 2, 3]
    assert payload["ranking"][0]["ratio"] == 3.0
    assert payload["ranking"][2]["ratio"] == "NaN"
    assert payload["ranking"][2]["value_at_year_b"] is None


def test_print_table_lists_regions():
    buffer = io.StringIO()
    result = RankingResult(year_a=2010, year_b=2015, ranking=_ranking())

    print_table(result, console=Console(file=buffer, width=120, color_system=None))

    output = buffer.getvalue()
    assert "Tokyo" in output
    assert "Akita" in output
    assert output.index("Tokyo") < output.index("Akita")


def test_print_table_empty_ranking():
    buffer = io.StringIO()
    print_table(RankingResult(year_a=2010, year_b=2015), console=Console(file=buffer, color_system=None))
    assert "No regions found" in buffer.getvalue()


def test_render_line_small_ratio_is_positional():
    entry = RankedRegion(region="X", value_at_year_a=100000, value_at_year_b=1, ratio=1e-5)
    assert render_line(entry) == "X: 100000=>1 growth-ratio:0.00001"
