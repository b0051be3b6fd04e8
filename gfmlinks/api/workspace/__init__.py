"""Workspace API module."""

from ._AbstractWorkspace import _AbstractWorkspace
from .EventRef import EventRef

__all__ = ["EventRef", "_AbstractWorkspace"]
