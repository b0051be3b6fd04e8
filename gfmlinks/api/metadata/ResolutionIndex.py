"""Per-document index of synthetic cache entries (UNO: single class)."""

from dataclasses import dataclass, field

from .HeadingCache import HeadingCache
from .LinkCache import LinkCache


@dataclass
class ResolutionIndex:
    """Synthetic entries already created for one document, by source identity."""

    headings: dict[str, HeadingCache] = field(default_factory=dict)
    links: dict[str, LinkCache] = field(default_factory=dict)

    def evict(self, live_headings: set[str], live_links: set[str]) -> int:
        """Drop entries whose source heading/link no longer exists.

        Returns:
            Number of entries removed
        """
        stale_headings = [k for k in self.headings if k not in live_headings]
        stale_links = [k for k in self.links if k not in live_links]
        for k in stale_headings:
            del self.headings[k]
        for k in stale_links:
            del self.links[k]
        return len(stale_headings) + len(stale_links)
