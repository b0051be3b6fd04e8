"""gfmlinks utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .get_logger import get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
