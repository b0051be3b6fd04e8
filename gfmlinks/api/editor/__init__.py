"""Editor API module."""

from ._AbstractEditor import _AbstractEditor
from .EditorPosition import EditorPosition
from .EditRewriter import EDIT_LINK_PATTERN, EditRewriter
from .NoActiveEditorError import NoActiveEditorError

__all__ = [
    "EDIT_LINK_PATTERN",
    "EditRewriter",
    "EditorPosition",
    "NoActiveEditorError",
    "_AbstractEditor",
]
