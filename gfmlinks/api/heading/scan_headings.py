"""Markdown heading scanner (UNO: single function)."""

import re
from collections.abc import Iterator

from .Heading import Heading

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+")


def scan_headings(text: str) -> Iterator[Heading]:
    """Extract ATX headings from raw document text in document order.

    Args:
        text: Markdown content

    Yields:
        Heading objects, one per line starting with 1-6 ``#`` and whitespace
    """
    # Lines break on "\n" only, matching editor and cache line numbers
    for line_num, line in enumerate(text.split("\n")):
        line = line.removesuffix("\r")
        match = HEADING_PATTERN.match(line)
        if match is None:
            continue
        yield Heading(
            text=line[match.end() :],
            level=len(match.group(1)),
            line_number=line_num,
            start_column=0,
            end_column=len(line),
        )
