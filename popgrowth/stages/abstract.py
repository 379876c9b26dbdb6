"""
Line handler interfaces for popgrowth.

The line-source drives the ranking through two notifications: one per input
line, then exactly one once the input is exhausted. Anything reacting to those
events implements LineHandler; the RankingPipeline is the production one.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class LineHandler(Protocol):
    """
    Receiver of line-source events.

    `handle_line` runs to completion before the next line is delivered;
    `handle_close` is called once, after the last line.
    """

    def handle_line(self, line: str) -> None:
        ...

    def handle_close(self) -> None:
        ...


class AbstractLineHandler(abc.ABC):
    """
    Optional ABC helper for class-based handlers.
    """

    @abc.abstractmethod
    def handle_line(self, line: str) -> None:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def handle_close(self) -> None:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = ["LineHandler", "AbstractLineHandler"]
