"""Slug <-> heading text link translation (UNO: single class)."""

from __future__ import annotations

import logging
import posixpath

from ..heading.iter_slugged_headings import iter_slugged_headings
from ..vault._AbstractVault import _AbstractVault
from ..vault.canonical_document_key import canonical_document_key
from ..vault.resolve_relative_path import resolve_relative_path
from .LinkResolutionError import LinkResolutionError
from .NoMatchingHeadingError import NoMatchingHeadingError
from .split_link import split_link
from .UnreadableDocumentError import UnreadableDocumentError
from .UnresolvablePathError import UnresolvablePathError

logger = logging.getLogger(__name__)


class LinkTranslator:
    """Translates heading links between slug form and heading text form.

    Every lookup reads and scans the whole target document with a fresh
    slugger; duplicate-heading numbering depends on full document order, so
    heading lists are never reused between calls.
    """

    def __init__(self, vault: _AbstractVault):
        self.vault = vault

    def resolve_target(self, path: str, source_path: str) -> str:
        """Vault-relative path of a link target ("" targets the source note)."""
        if not path:
            return canonical_document_key(source_path)
        return resolve_relative_path(posixpath.dirname(source_path), path)

    async def read_target(self, path: str, source_path: str) -> tuple[str, str]:
        """Resolve and read a link target.

        Returns:
            ``(target_path, text)``

        Raises:
            UnresolvablePathError: If the target is not a vault document
            UnreadableDocumentError: If the target cannot be read as text
        """
        target_path = self.resolve_target(path, source_path)
        file = self.vault.get_file_by_path(target_path)
        if file is None:
            raise UnresolvablePathError(target_path)
        try:
            text = await self.vault.read(file)
        except (OSError, UnicodeDecodeError) as e:
            raise UnreadableDocumentError(target_path, e) from e
        return target_path, text

    async def find_heading_by_slug(self, path: str, fragment: str, source_path: str) -> str:
        """Return the text of the first heading whose slug equals ``fragment``.

        Raises:
            UnresolvablePathError: If the target is not a vault document
            NoMatchingHeadingError: If no heading slugs to ``fragment``
        """
        target_path, text = await self.read_target(path, source_path)
        for heading, slug in iter_slugged_headings(text):
            if slug == fragment:
                return heading.text
        raise NoMatchingHeadingError(target_path, fragment)

    async def find_slug_by_heading_text(self, path: str, heading_text: str, source_path: str) -> str:
        """Return the slug of the first heading whose text equals ``heading_text``.

        Raises:
            UnresolvablePathError: If the target is not a vault document
            NoMatchingHeadingError: If no heading has that text
        """
        target_path, text = await self.read_target(path, source_path)
        for heading, slug in iter_slugged_headings(text):
            if heading.text == heading_text:
                return slug
        raise NoMatchingHeadingError(target_path, heading_text)

    async def fragment_to_heading_text(self, path: str, fragment: str, source_path: str) -> str:
        """Heading text for a slug fragment, or ``fragment`` unchanged when unresolved."""
        try:
            return await self.find_heading_by_slug(path, fragment, source_path)
        except LinkResolutionError as e:
            logger.warning("fragment_to_heading_text: %s", e)
            return fragment

    async def heading_text_to_slug(self, path: str, heading_text: str, source_path: str) -> str | None:
        """Slug for a heading text, or None when unresolved."""
        try:
            return await self.find_slug_by_heading_text(path, heading_text, source_path)
        except LinkResolutionError as e:
            logger.warning("heading_text_to_slug: %s", e)
            return None

    async def translate_link(self, linktext: str, source_path: str) -> str:
        """Rewrite ``path#slug`` into ``path#Heading Text``.

        Links without a fragment, and links that cannot be resolved, are
        returned exactly as given.
        """
        path, fragment = split_link(linktext)
        if not fragment:
            return linktext
        try:
            heading_text = await self.find_heading_by_slug(path, fragment, source_path)
        except NoMatchingHeadingError as e:
            # Already heading text, or a stale slug
            logger.debug("translate_link: %s", e)
            return linktext
        except LinkResolutionError as e:
            logger.warning("translate_link: %s (source %s)", e, source_path)
            return linktext
        return f"{path}#{heading_text}"
