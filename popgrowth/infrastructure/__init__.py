"""
Infrastructure package for popgrowth.

Centralizes input I/O concerns (opening and streaming the dataset).
Keep this layer focused on I/O, decoupled from the ranking logic.
"""

from popgrowth.infrastructure.line_source import (
    InputUnavailableError,
    dispatch_lines,
    open_lines,
    stream_file,
)

__all__ = [
    "InputUnavailableError",
    "dispatch_lines",
    "open_lines",
    "stream_file",
]
