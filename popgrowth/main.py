from __future__ import annotations

import contextlib
import sys
from pathlib import Path
from typing import Optional

import typer

from popgrowth.config import Settings, get_settings
from popgrowth.infrastructure.line_source import InputUnavailableError
from popgrowth.pipeline import run_ranking
from popgrowth.reporter import print_table, ranking_json
from popgrowth.utils.logging import configure_logging, get_logger
from popgrowth.utils.profiler import profile_block

app = typer.Typer(help="Population growth ranking CLI.")
log = get_logger(__name__)

OUTPUT_FORMATS = ("lines", "table", "json")


def _load_settings(**overrides: object) -> Settings:
    try:
        return get_settings().with_overrides(**overrides)
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _echo_lines(lines) -> None:
    for line in lines:
        typer.echo(line)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = _load_settings()
    typer.echo(
        f"input={settings.input_path} encoding={settings.encoding} "
        f"delimiter={settings.delimiter!r} | years={settings.year_a}->{settings.year_b} "
        f"columns(year,region,value)=({settings.year_column},{settings.region_column},"
        f"{settings.value_column}) skip_invalid={settings.skip_invalid}"
    )


@app.command()
def run(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Dataset CSV to rank (default from settings).",
    ),
    year_a: Optional[int] = typer.Option(
        None,
        "--year-a",
        help="Earlier census year (default from settings).",
    ),
    year_b: Optional[int] = typer.Option(
        None,
        "--year-b",
        help="Later census year (default from settings).",
    ),
    output_format: str = typer.Option(
        "lines",
        "--format",
        "-f",
        help="Output format: lines, table or json.",
    ),
    skip_invalid: Optional[bool] = typer.Option(
        None,
        "--skip-invalid/--keep-invalid",
        help="Drop target-year rows whose population is not an integer.",
    ),
    profile: bool = typer.Option(
        False,
        "--profile",
        help="Log duration and peak memory of the run.",
    ),
) -> None:
    """
    Rank regions by population growth between the two target years.
    """
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"expected one of {', '.join(OUTPUT_FORMATS)}", param_hint="--format"
        )
    settings = _load_settings(
        input_path=input_path, year_a=year_a, year_b=year_b, skip_invalid=skip_invalid
    )
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    sink = _echo_lines if output_format == "lines" else (lambda lines: None)
    profiler = profile_block("ranking") if profile else contextlib.nullcontext()
    try:
        with profiler as stats:
            result = run_ranking(settings=settings, sink=sink)
    except InputUnavailableError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if stats is not None:
        log.info("[PROFILE]", extra=stats.as_log_extra())

    if output_format == "table":
        print_table(result)
    elif output_format == "json":
        typer.echo(ranking_json(result))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
