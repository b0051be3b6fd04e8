"""Unresolvable link target error."""

from .LinkResolutionError import LinkResolutionError


class UnresolvablePathError(LinkResolutionError):
    """Raised when a link target is not a document in the vault."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'file not found at path: "{path}"')
