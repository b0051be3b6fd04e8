"""Split a heading link into path and fragment (UNO: single function)."""


def split_link(linktext: str) -> tuple[str, str | None]:
    """Split ``path#fragment`` at the first ``#``.

    Returns:
        ``(path, fragment)``; fragment is None when the link has no ``#``.

    Examples:
        >>> split_link("notes/a.md#Some Heading")
        ('notes/a.md', 'Some Heading')
        >>> split_link("#intro")
        ('', 'intro')
    """
    path, sep, fragment = linktext.partition("#")
    return path, (fragment if sep else None)
