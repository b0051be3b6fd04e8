"""Absolute form of a configured directory."""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    """``~`` expanded and made absolute; symlinks are left as written."""
    return Path(path).expanduser().absolute()
