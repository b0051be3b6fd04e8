"""Config API module."""

from .AdapterConfig import AdapterConfig
from .GfmLinksConfig import GfmLinksConfig
from .LogConfig import LogConfig

__all__ = ["AdapterConfig", "GfmLinksConfig", "LogConfig"]
