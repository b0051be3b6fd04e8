"""Source position models for cached metadata entries."""

from dataclasses import dataclass


@dataclass
class Loc:
    """A point in a document (0-based line and column)."""

    line: int
    col: int
    offset: int = 0


@dataclass
class Position:
    """Span of a cached entry in its document."""

    start: Loc
    end: Loc
