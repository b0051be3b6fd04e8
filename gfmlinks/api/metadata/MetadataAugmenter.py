"""Synthetic heading/link injection into cached metadata (UNO: single class)."""

from __future__ import annotations

import copy
import logging
from urllib.parse import quote, unquote

from ..link.split_link import split_link
from ..slug.GithubSlugger import GithubSlugger
from ..vault.canonical_document_key import canonical_document_key
from ..vault.VaultFile import VaultFile
from ._identity import _identity
from .CachedMetadata import CachedMetadata
from .HeadingCache import HeadingCache
from .LinkCache import LinkCache
from .replace_fragment import URI_SAFE, replace_fragment
from .ResolutionIndex import ResolutionIndex

logger = logging.getLogger(__name__)


class MetadataAugmenter:
    """Makes both slug and heading-text links resolve against a cache record.

    For every real heading a synthetic heading named by its slug is appended;
    for every real link whose fragment names a heading (by text or by slug) a
    synthetic link using the other spelling is appended. Real entries are never
    modified, and repeated calls on the same record append nothing new.
    """

    def __init__(self) -> None:
        self._indexes: dict[str, ResolutionIndex] = {}

    def index_for(self, document: str | VaultFile) -> ResolutionIndex:
        return self._indexes.setdefault(canonical_document_key(document), ResolutionIndex())

    def augment(self, record: CachedMetadata | None, document: str | VaultFile) -> CachedMetadata | None:
        """Append synthetic entries to ``record`` in place and return it."""
        if record is None:
            return None
        index = self.index_for(document)

        slug_for_text: dict[str, str] = {}
        text_for_slug: dict[str, str] = {}
        live_headings = self._augment_headings(record, index, slug_for_text, text_for_slug)
        live_links = self._augment_links(record, index, slug_for_text, text_for_slug)

        evicted = index.evict(live_headings, live_links)
        if evicted:
            logger.debug("Evicted %d stale synthetic entries for %s", evicted, canonical_document_key(document))
        return record

    def _augment_headings(
        self,
        record: CachedMetadata,
        index: ResolutionIndex,
        slug_for_text: dict[str, str],
        text_for_slug: dict[str, str],
    ) -> set[str]:
        live: set[str] = set()
        slugger = GithubSlugger()
        for heading in record.real_headings():
            key = _identity(heading.heading, heading.position.start.line, heading.position.start.col)
            live.add(key)
            slug = slugger.slug(heading.heading)

            entry = index.headings.get(key)
            if entry is None or entry.heading != slug:
                entry = HeadingCache(
                    heading=slug,
                    level=heading.level,
                    position=copy.deepcopy(heading.position),
                    synthetic=True,
                    original_heading=heading.heading,
                )
                index.headings[key] = entry
            if entry not in record.headings:
                record.headings.append(entry)

            slug_for_text.setdefault(heading.heading, slug)
            text_for_slug.setdefault(slug, heading.heading)
        return live

    def _augment_links(
        self,
        record: CachedMetadata,
        index: ResolutionIndex,
        slug_for_text: dict[str, str],
        text_for_slug: dict[str, str],
    ) -> set[str]:
        live: set[str] = set()
        for link in record.real_links():
            path, fragment = split_link(link.link)
            if not fragment:
                continue
            decoded = unquote(fragment)
            counterpart = slug_for_text.get(decoded, text_for_slug.get(decoded))
            if counterpart is None or counterpart == decoded:
                continue

            key = _identity(link.original, link.position.start.line, link.position.start.col)
            live.add(key)
            target = f"{path}#{counterpart}"

            entry = index.links.get(key)
            if entry is None or entry.link != target:
                entry = LinkCache(
                    link=target,
                    original=replace_fragment(link.original, fragment, quote(counterpart, safe=URI_SAFE)),
                    position=copy.deepcopy(link.position),
                    display_text=link.display_text,
                    synthetic=True,
                )
                index.links[key] = entry
            if entry not in record.links:
                record.links.append(entry)
        return live
