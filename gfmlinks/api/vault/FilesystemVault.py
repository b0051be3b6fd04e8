"""
Filesystem-backed vault.

Implements _AbstractVault over a directory of Markdown notes so the link engine
can run against a vault on disk without a host application.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ._AbstractVault import _AbstractVault
from .VaultConfig import VaultConfig
from .VaultFile import VaultFile


class FilesystemVault(_AbstractVault):
    """Vault whose documents are files under a base directory."""

    def __init__(self, vault_path: Path):
        self._vault_path = Path(vault_path)

    @classmethod
    def from_config(cls, vault_config: VaultConfig) -> FilesystemVault:
        return cls(Path(vault_config.base_dir))

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def get_file_by_path(self, path: str) -> VaultFile | None:
        rel = path.strip().lstrip("/")
        if not rel:
            return None
        abs_path = self._vault_path / rel
        try:
            abs_path.resolve().relative_to(self._vault_path.resolve())
        except ValueError:
            # Too many ".." segments walked out of the vault
            return None
        if not abs_path.is_file():
            return None
        return VaultFile(path=Path(rel).as_posix())

    async def read(self, file: VaultFile) -> str:
        return await asyncio.to_thread((self._vault_path / file.path).read_text, encoding="utf-8")
