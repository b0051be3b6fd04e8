"""EditorPosition model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditorPosition:
    """Cursor or range bound in an editor buffer (0-based)."""

    line: int
    ch: int
