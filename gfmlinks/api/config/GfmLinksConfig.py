"""Top-level gfmlinks configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..vault.VaultConfig import VaultConfig
from .AdapterConfig import AdapterConfig
from .get_config_path import get_config_path
from .LogConfig import LogConfig


class GfmLinksConfig(BaseModel):
    """Top-level configuration for gfmlinks."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig | None = None
    adapter: AdapterConfig = Field(default_factory=AdapterConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "GfmLinksConfig":
        """Read ``config.json`` (default: under the gfmlinks home).

        Raises:
            ValueError: Missing file, malformed JSON, or a rejected field
        """
        path = path or get_config_path()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise ValueError(f"Configuration file not found at {path}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            detail = f"{field}: {first['msg']}" if field else first["msg"]
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump(mode="json", exclude_none=True)

    def save(self, path: Path | None = None) -> None:
        """Write the configuration as JSON through a sibling ``.tmp`` file."""
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(self.to_dict(), indent=4), encoding="utf-8")
            tmp.replace(path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise RuntimeError(f"Failed to save config: {e}") from e
