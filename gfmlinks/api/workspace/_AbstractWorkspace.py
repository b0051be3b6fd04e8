"""Abstract base class for the host workspace."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from .EventRef import EventRef


class _AbstractWorkspace(ABC):
    """Host navigation and event surface."""

    @abstractmethod
    async def open_link_text(
        self,
        linktext: str,
        source_path: str,
        new_leaf: bool = False,
        open_view_state: dict[str, Any] | None = None,
    ) -> None:
        """Navigate to ``linktext`` as written in ``source_path``."""
        pass

    @abstractmethod
    def on(self, name: str, callback: Callable[..., Any]) -> EventRef:
        """Subscribe to a workspace event."""
        pass

    @abstractmethod
    def off(self, ref: EventRef) -> None:
        """Remove a subscription made with on()."""
        pass
