"""Abstract base class for the host's document store."""

from abc import ABC, abstractmethod

from .VaultFile import VaultFile


class _AbstractVault(ABC):
    """Read-only view of the host vault used to look up and read notes."""

    @abstractmethod
    def get_file_by_path(self, path: str) -> VaultFile | None:
        """Return the file at a vault-relative path, or None when absent."""
        pass

    @abstractmethod
    async def read(self, file: VaultFile) -> str:
        """Read the full text of a document."""
        pass
