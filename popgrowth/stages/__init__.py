"""
Stages package for popgrowth.

Re-exports the handler interfaces and the parse -> aggregate -> ratio -> rank
stages so downstream code can import from `popgrowth.stages` directly.
"""

from popgrowth.stages.abstract import AbstractLineHandler, LineHandler
from popgrowth.stages.aggregator import RegionAggregator
from popgrowth.stages.parser import parse_int, parse_record
from popgrowth.stages.ranker import rank
from popgrowth.stages.ratio import finalize, growth_ratio

__all__ = [
    # Abstracts
    "AbstractLineHandler",
    "LineHandler",
    # Stages
    "RegionAggregator",
    "finalize",
    "growth_ratio",
    "parse_int",
    "parse_record",
    "rank",
]
