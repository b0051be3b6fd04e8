"""Abstract base class for the host's metadata cache."""

from abc import ABC, abstractmethod

from ..vault.VaultFile import VaultFile
from .CachedMetadata import CachedMetadata


class _AbstractMetadataCache(ABC):
    """Host index of parsed headings and links per document."""

    @abstractmethod
    def get_cache(self, path: str) -> CachedMetadata | None:
        """Cached metadata for a vault-relative path."""
        pass

    @abstractmethod
    def get_file_cache(self, file: VaultFile) -> CachedMetadata | None:
        """Cached metadata for a file handle."""
        pass
