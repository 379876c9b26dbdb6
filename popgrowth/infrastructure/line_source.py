"""
Line-source for popgrowth.

Opens a text file and feeds it to a LineHandler one line at a time, then
signals exhaustion exactly once. Line terminators are stripped before
delivery. If the file cannot be opened no handler method is called.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Iterable, TextIO

from popgrowth.stages.abstract import LineHandler
from popgrowth.utils.logging import get_logger

log = get_logger(__name__)


class InputUnavailableError(OSError):
    """The input could not be opened or read."""


@contextmanager
def open_lines(path: Path | str, encoding: str = "utf-8") -> Generator[TextIO, None, None]:
    """
    Open `path` for line-by-line reading, translating OS failures.
    """
    try:
        stream = open(path, "r", encoding=encoding, newline="")
    except OSError as exc:
        raise InputUnavailableError(f"cannot open input {str(path)!r}: {exc.strerror or exc}") from exc
    try:
        yield stream
    finally:
        stream.close()


def dispatch_lines(lines: Iterable[str], handler: LineHandler) -> int:
    """
    Deliver each line to `handler`, then close it. Returns the line count.
    """
    count = 0
    for raw in lines:
        handler.handle_line(raw.rstrip("\r\n"))
        count += 1
    handler.handle_close()
    return count


def stream_file(path: Path | str, handler: LineHandler, encoding: str = "utf-8") -> int:
    """
    Stream the file at `path` into `handler`.

    Returns the number of lines delivered.
    """
    with open_lines(path, encoding=encoding) as stream:
        log.debug("Streaming input", extra={"path": str(path), "encoding": encoding})
        try:
            return dispatch_lines(stream, handler)
        except UnicodeDecodeError as exc:
            raise InputUnavailableError(f"cannot decode input {str(path)!r} as {encoding}: {exc}") from exc


__all__ = ["InputUnavailableError", "dispatch_lines", "open_lines", "stream_file"]
