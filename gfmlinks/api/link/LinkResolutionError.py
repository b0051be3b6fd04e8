"""Base error for heading link resolution."""


class LinkResolutionError(Exception):
    """Raised when a heading link cannot be translated.

    Never fatal: callers log it and keep the link as written.
    """
