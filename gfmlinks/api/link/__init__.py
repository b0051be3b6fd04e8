"""Link API module."""

from .LinkResolutionError import LinkResolutionError
from .LinkTranslator import LinkTranslator
from .NoMatchingHeadingError import NoMatchingHeadingError
from .split_link import split_link
from .UnreadableDocumentError import UnreadableDocumentError
from .UnresolvablePathError import UnresolvablePathError

__all__ = [
    "LinkResolutionError",
    "LinkTranslator",
    "NoMatchingHeadingError",
    "UnreadableDocumentError",
    "UnresolvablePathError",
    "split_link",
]
