"""Heading model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """A Markdown ATX heading found while scanning a document."""

    text: str
    level: int
    line_number: int  # 0-based, matching editor and metadata cache positions
    start_column: int
    end_column: int
