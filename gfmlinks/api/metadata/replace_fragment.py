"""Rewrite the fragment of a raw Markdown link (UNO: single function)."""

from urllib.parse import quote

# Characters encodeURI leaves alone, minus the parentheses that end a Markdown link
URI_SAFE = "/;,?:@&=+$!*'#"


def replace_fragment(original: str, fragment: str, new_fragment: str) -> str:
    """Replace the ``#fragment`` portion of raw link text.

    The fragment may appear percent-encoded in the raw text even when the
    parsed link holds it decoded; both spellings are tried, last occurrence
    first.
    """
    for candidate in (fragment, quote(fragment, safe=URI_SAFE), fragment.replace(" ", "%20")):
        idx = original.rfind("#" + candidate)
        if idx != -1:
            start = idx + 1
            return original[:start] + new_fragment + original[start + len(candidate) :]
    return original.replace(fragment, new_fragment, 1)
