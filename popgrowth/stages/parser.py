"""
Record parser: one raw delimited line -> ParsedRecord.

Parsing never fails. Numeric fields are read leniently (leading integer,
trailing garbage ignored) and anything without a leading integer becomes
None, the not-a-number marker used throughout the domain models.
"""

from __future__ import annotations

import re
from typing import List, Optional

from popgrowth.domain.models import ParsedRecord

DEFAULT_DELIMITER = ","
YEAR_COLUMN = 0
REGION_COLUMN = 1
VALUE_COLUMN = 3

_LEADING_INT = re.compile(r"[\s\ufeff]*([+-]?[0-9]+)")


def parse_int(text: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of `text`.

    >>> parse_int(" 2010")
    2010
    >>> parse_int("12abc")
    12
    >>> parse_int("集計年") is None
    True
    """
    if text is None:
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def _field(columns: List[str], index: int) -> Optional[str]:
    return columns[index] if index < len(columns) else None


def parse_record(
    line: str,
    delimiter: str = DEFAULT_DELIMITER,
    year_column: int = YEAR_COLUMN,
    region_column: int = REGION_COLUMN,
    value_column: int = VALUE_COLUMN,
) -> ParsedRecord:
    """
    Split `line` on `delimiter` and pick year, region and value by position.

    The region is kept verbatim (no trimming). A line too short to have a
    region field gets an empty region, so it groups with lines whose region
    field is present but empty.
    """
    columns = line.split(delimiter)
    return ParsedRecord(
        year=parse_int(_field(columns, year_column)),
        region=_field(columns, region_column) or "",
        value=parse_int(_field(columns, value_column)),
    )


__all__ = ["parse_int", "parse_record"]
