"""Cache entry identity calculation."""

import hashlib


def _identity(text: str, line: int, col: int) -> str:
    """Generate deterministic ID for a heading or link entry."""
    payload = f"{text}|{line}|{col}".encode("utf-8", errors="ignore")
    return hashlib.sha256(payload).hexdigest()
