"""Pair headings with their slugs (UNO: single function)."""

from collections.abc import Iterator

from ..slug.GithubSlugger import GithubSlugger
from .Heading import Heading
from .scan_headings import scan_headings


def iter_slugged_headings(text: str) -> Iterator[tuple[Heading, str]]:
    """Scan a whole document and yield each heading with its slug.

    A fresh slugger is used for every call, so duplicate numbering only
    depends on the document's own heading order.
    """
    slugger = GithubSlugger()
    for heading in scan_headings(text):
        yield heading, slugger.slug(heading.text)
