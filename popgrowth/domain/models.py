"""
Domain models for popgrowth.

A not-a-number population or year (a field that did not parse as an integer)
is represented as `None`. Ratios are plain floats and may be `inf` or `nan`.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ParsedRecord(BaseModel):
    """
    One input line reduced to the three fields the ranking uses.
    """

    year: Optional[int] = Field(None, description="Census year; None when not numeric.")
    region: str = Field(..., description="Grouping key, taken verbatim.")
    value: Optional[int] = Field(None, description="Population figure; None when not numeric.")

    model_config = {"frozen": True}


class RegionAccumulator(BaseModel):
    """
    Per-region figures for the two target years, mutated while lines stream in.
    """

    value_at_year_a: Optional[int] = 0
    value_at_year_b: Optional[int] = 0
    ratio: Optional[float] = Field(None, description="Set once input is exhausted.")


class RankedRegion(BaseModel):
    """
    A finalized region as it appears in the ranking.
    """

    region: str
    value_at_year_a: Optional[int]
    value_at_year_b: Optional[int]
    ratio: float

    model_config = {"frozen": True}


class RankingResult(BaseModel):
    """
    Outcome of one run: the ordered ranking plus the counters logged for it.
    """

    year_a: int
    year_b: int
    lines_read: int = 0
    records_accepted: int = 0
    ranking: List[RankedRegion] = Field(default_factory=list)


__all__ = ["ParsedRecord", "RegionAccumulator", "RankedRegion", "RankingResult"]
