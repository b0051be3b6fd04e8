"""Metadata cache API module."""

from ._AbstractMetadataCache import _AbstractMetadataCache
from .CachedMetadata import CachedMetadata
from .HeadingCache import HeadingCache
from .LinkCache import LinkCache
from .MetadataAugmenter import MetadataAugmenter
from .Position import Loc, Position
from .ResolutionIndex import ResolutionIndex

__all__ = [
    "CachedMetadata",
    "HeadingCache",
    "LinkCache",
    "Loc",
    "MetadataAugmenter",
    "Position",
    "ResolutionIndex",
    "_AbstractMetadataCache",
]
