"""
popgrowth - Population growth ranking for per-region census datasets.

Reads a `<year>,<region>,<unused>,<value>` CSV, aggregates each region's
population for two target census years, computes the growth ratio between
them and ranks regions by descending ratio:

- Record parsing (lenient integers, never fails)
- Per-region aggregation for the two target years
- Growth ratio computation once input is exhausted
- Ranking by descending ratio (stable ties, nan last)
- Plain-line, table, and JSON presentation
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from popgrowth.config import Settings, get_settings
from popgrowth.domain.models import ParsedRecord, RankedRegion, RankingResult, RegionAccumulator
from popgrowth.infrastructure.line_source import InputUnavailableError, stream_file
from popgrowth.pipeline import RankingPipeline, run_ranking
from popgrowth.reporter import format_number, render_line, render_lines
from popgrowth.stages import (
    LineHandler,
    RegionAggregator,
    finalize,
    growth_ratio,
    parse_record,
    rank,
)
from popgrowth.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "ParsedRecord",
    "RankedRegion",
    "RankingResult",
    "RegionAccumulator",
    # Pipeline
    "InputUnavailableError",
    "LineHandler",
    "RankingPipeline",
    "run_ranking",
    "stream_file",
    # Stages
    "RegionAggregator",
    "finalize",
    "growth_ratio",
    "parse_record",
    "rank",
    # Presentation
    "format_number",
    "render_line",
    "render_lines",
    # Logging
    "configure_logging",
    "get_logger",
]
