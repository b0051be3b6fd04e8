"""Vault API module."""

from ._AbstractVault import _AbstractVault
from .canonical_document_key import canonical_document_key
from .FilesystemVault import FilesystemVault
from .resolve_relative_path import resolve_relative_path
from .VaultConfig import VaultConfig
from .VaultFile import VaultFile

__all__ = [
    "FilesystemVault",
    "VaultConfig",
    "VaultFile",
    "_AbstractVault",
    "canonical_document_key",
    "resolve_relative_path",
]
