"""No matching heading error."""

from .LinkResolutionError import LinkResolutionError


class NoMatchingHeadingError(LinkResolutionError):
    """Raised when no heading in the target document matches a fragment."""

    def __init__(self, path: str, fragment: str):
        self.path = path
        self.fragment = fragment
        super().__init__(f'no heading matching "{fragment}" in "{path}"')
