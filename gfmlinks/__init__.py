"""gfmlinks - GitHub-flavored heading links for note vaults."""

__version__ = "0.1.0"
