"""EventRef model (UNO: single model)."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EventRef:
    """Handle returned by a workspace subscription, used to unsubscribe."""

    name: str
    callback: Callable[..., Any]
