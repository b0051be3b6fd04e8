"""Canonical document identity (UNO: single function)."""

import posixpath

from .VaultFile import VaultFile


def canonical_document_key(document: str | VaultFile) -> str:
    """Normalize a path or file handle into one vault-relative key.

    Path-keyed and file-keyed metadata requests for the same note map to the
    same key.
    """
    path = document.path if isinstance(document, VaultFile) else document
    path = path.replace("\\", "/").strip().lstrip("/")
    if not path:
        return ""
    return posixpath.normpath(path)
