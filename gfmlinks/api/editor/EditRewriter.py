"""Live heading-link completion while typing (UNO: single class)."""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import unquote

from ..link.LinkResolutionError import LinkResolutionError
from ..link.LinkTranslator import LinkTranslator
from ..link.NoMatchingHeadingError import NoMatchingHeadingError
from ._AbstractEditor import _AbstractEditor
from .EditorPosition import EditorPosition
from .NoActiveEditorError import NoActiveEditorError

logger = logging.getLogger(__name__)

# [display](path#fragment) ending exactly at the cursor
EDIT_LINK_PATTERN = re.compile(r"\[[^\]]*\]\(([^#]*)#([^)]+)\)$")


class EditRewriter:
    """Turns a just-typed ``[x](file.md#Heading Text)`` into the slug form.

    Runs on every editor change. Only the link ending at the cursor is
    considered; the document itself is never saved.
    """

    def __init__(self, translator: LinkTranslator):
        self.translator = translator

    async def on_editor_change(self, editor: _AbstractEditor | None, change: Any = None) -> bool:
        """Handle one editor change event.

        Returns:
            True if a fragment was replaced
        """
        if editor is None:
            logger.warning("on_editor_change: %s", NoActiveEditorError())
            return False

        pos = editor.get_cursor()
        part = editor.get_line(pos.line)[: pos.ch]
        matches = list(EDIT_LINK_PATTERN.finditer(part))
        if not matches:
            return False
        match = matches[-1]
        path_part, fragment_part = match.group(1), match.group(2)

        try:
            slug = await self._slug_for(editor, path_part, unquote(fragment_part))
        except NoMatchingHeadingError as e:
            logger.debug("on_editor_change: %s", e)
            return False
        except LinkResolutionError as e:
            logger.warning("on_editor_change: %s", e)
            return False

        if slug == fragment_part:
            return False
        start_ch = match.start(2)
        end_ch = match.end(2)
        editor.replace_range(slug, EditorPosition(pos.line, start_ch), EditorPosition(pos.line, end_ch))
        logger.debug("Rewrote heading fragment %r -> %r on line %d", fragment_part, slug, pos.line)
        return True

    async def _slug_for(self, editor: _AbstractEditor, path_part: str, heading_text: str) -> str:
        source_path = editor.file_path
        if source_path is None:
            raise NoActiveEditorError("editor has no document to resolve links against")
        return await self.translator.find_slug_by_heading_text(path_part, heading_text, source_path)
