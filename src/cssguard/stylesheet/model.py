"""Stylesheet model: StyleRule and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StyleRule:
    """A single rule as authored: its selector text and where it starts.

    ``line`` and ``column`` are 1-based and point at the first character of
    the selector.
    """

    selector: str
    line: int = 1
    column: int = 1


@dataclass(frozen=True)
class Stylesheet:
    """The rules of one stylesheet, in document order."""

    rules: list[StyleRule] = field(default_factory=list)
    path: str | None = None
