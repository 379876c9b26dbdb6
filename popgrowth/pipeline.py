"""
Ranking pipeline: wires the stages to the line-source and the line-sink.

Usage (example from CLI):
    from popgrowth.pipeline import run_ranking

    result = run_ranking("popu-pref.csv")
    for entry in result.ranking:
        print(entry.region, entry.ratio)

Each line is parsed and folded as it arrives. Once the source is exhausted the
ratios are computed, the regions ranked and rendered, and the rendered lines
handed to the sink in one call.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from popgrowth.config import Settings, get_settings
from popgrowth.domain.models import RankingResult
from popgrowth.infrastructure.line_source import stream_file
from popgrowth.reporter import LineSink, console_sink, render_lines
from popgrowth.stages.abstract import AbstractLineHandler
from popgrowth.stages.aggregator import RegionAggregator
from popgrowth.stages.parser import parse_record
from popgrowth.stages.ranker import rank
from popgrowth.stages.ratio import finalize
from popgrowth.utils.logging import get_logger

log = get_logger(__name__)


class RankingPipeline(AbstractLineHandler):
    """
    LineHandler that turns a stream of dataset lines into a growth ranking.
    """

    def __init__(self, settings: Settings, sink: Optional[LineSink] = None) -> None:
        self.settings = settings
        self.sink = sink
        self.aggregator = RegionAggregator(
            settings.year_a, settings.year_b, skip_invalid=settings.skip_invalid
        )
        self.lines_read = 0
        self.result: Optional[RankingResult] = None
        self.rendered: List[str] = []

    def handle_line(self, line: str) -> None:
        if self.result is not None:
            raise RuntimeError("pipeline already closed")
        self.lines_read += 1
        record = parse_record(
            line,
            delimiter=self.settings.delimiter,
            year_column=self.settings.year_column,
            region_column=self.settings.region_column,
            value_column=self.settings.value_column,
        )
        if not self.aggregator.add(record):
            log.debug("Discarded line", extra={"line_no": self.lines_read, "year": record.year})

    def handle_close(self) -> None:
        if self.result is not None:
            raise RuntimeError("pipeline already closed")
        accumulators = self.aggregator.accumulators
        finalize(accumulators)
        ranking = rank(accumulators)
        self.rendered = render_lines(ranking)
        self.result = RankingResult(
            year_a=self.settings.year_a,
            year_b=self.settings.year_b,
            lines_read=self.lines_read,
            records_accepted=self.aggregator.accepted,
            ranking=ranking,
        )
        log.info(
            "[RANKING COMPLETE]",
            extra={
                "lines_read": self.lines_read,
                "records_accepted": self.aggregator.accepted,
                "regions": len(ranking),
            },
        )
        if self.sink is not None:
            self.sink(self.rendered)


def run_ranking(
    path: Path | str | None = None,
    settings: Optional[Settings] = None,
    sink: Optional[LineSink] = None,
) -> RankingResult:
    """
    Rank the regions of one dataset file.

    Parameters
    ----------
    path : Path | str | None
        Dataset location. Defaults to settings.input_path.
    settings : Settings | None
        Effective configuration. Defaults to the cached environment settings.
    sink : LineSink | None
        Receives the rendered lines once ranking completes. Defaults to stdout.

    Returns
    -------
    RankingResult
        The ordered ranking and the run counters.
    """
    settings = settings or get_settings()
    source = Path(path) if path is not None else settings.input_path
    pipeline = RankingPipeline(settings, sink=sink if sink is not None else console_sink())

    log.info(
        "[RANKING START]",
        extra={"input": str(source), "year_a": settings.year_a, "year_b": settings.year_b},
    )
    stream_file(source, pipeline, encoding=settings.encoding)
    if pipeline.result is None:
        raise RuntimeError("input source finished without signalling exhaustion")
    return pipeline.result


__all__ = ["RankingPipeline", "run_ranking"]
