"""API module for gfmlinks.

Each subpackage owns one concern of the heading-link engine; files export a
single class or function named after the file.
"""

__all__ = []
