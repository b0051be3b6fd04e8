"""VaultFile model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VaultFile:
    """Handle to a document in the vault, addressed by vault-relative path."""

    path: str
