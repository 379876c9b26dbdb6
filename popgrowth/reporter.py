from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from popgrowth.domain.models import RankedRegion, RankingResult

LineSink = Callable[[Sequence[str]], None]

# Positional notation is used while the decimal point sits within these
# bounds of the leading digit; outside them the exponent form is printed.
_MAX_POINT_POSITION = 21
_MIN_POINT_POSITION = -6


def _format_float(value: float) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    digits_tuple = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(digit) for digit in digits_tuple.digits)
    count = len(digits)
    # value == 0.<digits> * 10 ** point
    point = count + digits_tuple.exponent

    if count <= point <= _MAX_POINT_POSITION:
        return sign + digits + "0" * (point - count)
    if 0 < point <= _MAX_POINT_POSITION:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if _MIN_POINT_POSITION < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"

    exponent = point - 1
    mantissa = digits[0] if count == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def format_number(value: Optional[float]) -> str:
    """
    Raw numeric-to-string conversion used in rendered lines.

    Finite floats use the shortest round-trip digits: integral values print
    without a fractional part (3.0 -> "3"), 1e-5 prints "0.00001" and very
    large or small magnitudes use an unpadded exponent ("1e+21", "1e-7").
    None and nan print "NaN", infinities print "Infinity" / "-Infinity".
    """
    if value is None:
        return "NaN"
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return _format_float(value)


def render_line(entry: RankedRegion) -> str:
    """
    Render one ranked region as `<region>: <a>=><b> growth-ratio:<ratio>`.
    """
    return (
        f"{entry.region}: {format_number(entry.value_at_year_a)}"
        f"=>{format_number(entry.value_at_year_b)}"
        f" growth-ratio:{format_number(entry.ratio)}"
    )


def render_lines(ranking: Sequence[RankedRegion]) -> List[str]:
    return [render_line(entry) for entry in ranking]


def console_sink(console: Optional[Console] = None) -> LineSink:
    """
    Build a line-sink that writes each line verbatim to the console (stdout).
    """
    out = console or Console(highlight=False, emoji=False, soft_wrap=True)

    def _write(lines: Sequence[str]) -> None:
        for line in lines:
            out.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)

    return _write


def ranking_payload(result: RankingResult) -> Dict[str, Any]:
    """
    JSON-safe representation of a run. Non-finite ratios become strings.
    """
    return {
        "year_a": result.year_a,
        "year_b": result.year_b,
        "lines_read": result.lines_read,
        "records_accepted": result.records_accepted,
        "ranking": [
            {
                "rank": position,
                "region": entry.region,
                "value_at_year_a": entry.value_at_year_a,
                "value_at_year_b": entry.value_at_year_b,
                "ratio": entry.ratio if math.isfinite(entry.ratio) else format_number(entry.ratio),
            }
            for position, entry in enumerate(result.ranking, start=1)
        ],
    }


def ranking_json(result: RankingResult) -> str:
    return json.dumps(ranking_payload(result), indent=2, ensure_ascii=False)


def print_table(result: RankingResult, console: Optional[Console] = None) -> None:
    """
    Render the ranking as a rich table.
    """
    console = console or Console()

    if not result.ranking:
        console.print("[yellow]No regions found for the target years.[/yellow]")
        return

    table = Table(
        title=f"Population growth {result.year_a} → {result.year_b}",
        box=box.ROUNDED,
        caption="Sorted by growth ratio (descending)",
    )
    table.add_column("#", justify="right", style="blue")
    table.add_column("Region", style="cyan", no_wrap=True)
    table.add_column(str(result.year_a), justify="right", style="magenta")
    table.add_column(str(result.year_b), justify="right", style="magenta")
    table.add_column("Growth ratio", justify="right", style="bold green")

    for position, entry in enumerate(result.ranking, start=1):
        table.add_row(
            str(position),
            escape(entry.region),
            format_number(entry.value_at_year_a),
            format_number(entry.value_at_year_b),
            format_number(entry.ratio),
        )

    console.print(table)


__all__ = [
    "LineSink",
    "console_sink",
    "format_number",
    "print_table",
    "ranking_json",
    "ranking_payload",
    "render_line",
    "render_lines",
]
