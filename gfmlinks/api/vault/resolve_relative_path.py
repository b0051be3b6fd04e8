"""Relative link target resolution (UNO: single function)."""

import posixpath


def resolve_relative_path(source_directory: str, relative_target: str) -> str:
    """Resolve a link target against the directory of the linking note.

    Every ``..`` in the target's directory part climbs ``source_directory`` one
    level; the filename is then joined onto the parent of the climbed directory.
    A plain filename therefore resolves one level above the linking note, so
    ``other.md`` linked from ``notes/a.md`` is ``other.md`` at the vault root, not
    ``notes/other.md``.
    Targets that climb past the vault root are not validated here, the vault
    lookup on the result simply fails.

    Args:
        source_directory: Vault-relative directory of the note holding the link
        relative_target: Link target, e.g. ``../other.md``

    Returns:
        Vault-relative path of the target document

    Examples:
        >>> resolve_relative_path("notes/sub", "../other.md")
        'notes/other.md'
        >>> resolve_relative_path("notes", "other.md")
        'other.md'
    """
    filename = posixpath.basename(relative_target)
    target_dir = posixpath.dirname(relative_target)
    while posixpath.dirname(target_dir).endswith(".."):
        source_directory = posixpath.dirname(source_directory)
        target_dir = posixpath.dirname(target_dir)
    return posixpath.join(posixpath.dirname(source_directory), filename)
