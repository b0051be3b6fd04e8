"""Abstract base class for a live editor buffer."""

from abc import ABC, abstractmethod

from .EditorPosition import EditorPosition


class _AbstractEditor(ABC):
    """The host's active text editor."""

    @property
    @abstractmethod
    def file_path(self) -> str | None:
        """Vault-relative path of the edited document, None if unsaved/detached."""
        pass

    @abstractmethod
    def get_cursor(self) -> EditorPosition:
        pass

    @abstractmethod
    def get_line(self, line: int) -> str:
        pass

    @abstractmethod
    def replace_range(self, replacement: str, start: EditorPosition, end: EditorPosition) -> None:
        """Replace the buffer text between ``start`` and ``end`` (end exclusive)."""
        pass
