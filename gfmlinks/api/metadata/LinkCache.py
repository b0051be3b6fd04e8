"""Cached link entry (UNO: single model)."""

from dataclasses import dataclass

from .Position import Position


@dataclass
class LinkCache:
    """A link as stored in the host's metadata cache."""

    link: str  # target, e.g. "notes/a.md#Some Heading"
    original: str  # raw source text, e.g. "[a](notes/a.md#Some%20Heading)"
    position: Position
    display_text: str | None = None
    synthetic: bool = False
