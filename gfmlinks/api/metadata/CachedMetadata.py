"""Cached metadata record (UNO: single model)."""

from dataclasses import dataclass, field

from .HeadingCache import HeadingCache
from .LinkCache import LinkCache


@dataclass
class CachedMetadata:
    """Per-document metadata record owned by the host cache.

    The record is shared with other consumers, so entries are only ever
    appended, never modified or removed.
    """

    headings: list[HeadingCache] = field(default_factory=list)
    links: list[LinkCache] = field(default_factory=list)

    def real_headings(self) -> list[HeadingCache]:
        return [h for h in self.headings if not h.synthetic]

    def synthetic_headings(self) -> list[HeadingCache]:
        return [h for h in self.headings if h.synthetic]

    def real_links(self) -> list[LinkCache]:
        return [link for link in self.links if not link.synthetic]

    def synthetic_links(self) -> list[LinkCache]:
        return [link for link in self.links if link.synthetic]
