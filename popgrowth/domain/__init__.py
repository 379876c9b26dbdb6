"""
Domain package for popgrowth.

Exports the data definitions shared by the stages, the pipeline, and the
reporter. Keep this package focused on data definitions.
"""

from popgrowth.domain.models import ParsedRecord, RankedRegion, RankingResult, RegionAccumulator

__all__ = [
    "ParsedRecord",
    "RankedRegion",
    "RankingResult",
    "RegionAccumulator",
]
