"""Unreadable document error."""

from .LinkResolutionError import LinkResolutionError


class UnreadableDocumentError(LinkResolutionError):
    """Raised when a link target exists but its text cannot be read."""

    def __init__(self, path: str, reason: Exception):
        self.path = path
        self.reason = reason
        super().__init__(f'cannot read "{path}": {reason}')
