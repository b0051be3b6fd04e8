"""Plugin lifecycle API module."""

from .Interceptor import Interceptor
from .LinkAdapter import LinkAdapter

__all__ = ["Interceptor", "LinkAdapter"]
