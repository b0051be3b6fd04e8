"""Base GFM slug transformation (UNO: single function)."""

import re

_DISALLOWED = re.compile(r"[^a-z0-9 _-]")
_SPACES = re.compile(r" +")


def slugify(text: str) -> str:
    """Convert heading text to its GFM anchor slug, without disambiguation.

    Case-folds, drops every character outside ``[a-z0-9 _-]``, trims and
    collapses runs of spaces into a single hyphen.

    Examples:
        >>> slugify("Plumbing Notes")
        'plumbing-notes'
        >>> slugify("What's New?")
        'whats-new'
    """
    slug = _DISALLOWED.sub("", text.casefold())
    return _SPACES.sub("-", slug.strip())
