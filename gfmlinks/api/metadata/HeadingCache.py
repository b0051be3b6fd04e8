"""Cached heading entry (UNO: single model)."""

from dataclasses import dataclass

from .Position import Position


@dataclass
class HeadingCache:
    """A heading as stored in the host's metadata cache.

    Synthetic entries mirror a real heading under its slug; ``original_heading``
    keeps the text they were derived from.
    """

    heading: str
    level: int
    position: Position
    synthetic: bool = False
    original_heading: str | None = None
