"""No active editor error."""

from ..link.LinkResolutionError import LinkResolutionError


class NoActiveEditorError(LinkResolutionError):
    """Raised when an edit needs a document-backed editor and there is none."""

    def __init__(self, message: str = "no active editor document"):
        super().__init__(message)
