"""Heading API module."""

from .Heading import Heading
from .iter_slugged_headings import iter_slugged_headings
from .scan_headings import HEADING_PATTERN, scan_headings

__all__ = ["HEADING_PATTERN", "Heading", "iter_slugged_headings", "scan_headings"]
