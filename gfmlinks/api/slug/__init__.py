"""Slug API module."""

from .GithubSlugger import GithubSlugger
from .slugify import slugify

__all__ = ["GithubSlugger", "slugify"]
