"""Shared pytest configuration and fixtures for all tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from gfmlinks.api.editor._AbstractEditor import _AbstractEditor
from gfmlinks.api.editor.EditorPosition import EditorPosition
from gfmlinks.api.metadata._AbstractMetadataCache import _AbstractMetadataCache
from gfmlinks.api.metadata.CachedMetadata import CachedMetadata
from gfmlinks.api.vault._AbstractVault import _AbstractVault
from gfmlinks.api.vault.VaultFile import VaultFile
from gfmlinks.api.workspace._AbstractWorkspace import _AbstractWorkspace
from gfmlinks.api.workspace.EventRef import EventRef


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning several components")


# =============================================================================
# In-memory host doubles
# =============================================================================


class InMemoryVault(_AbstractVault):
    """Vault holding documents in a dict keyed by vault-relative path."""

    def __init__(self, documents: dict[str, str] | None = None):
        self.documents = dict(documents or {})
        self.reads: list[str] = []

    def get_file_by_path(self, path: str) -> VaultFile | None:
        return VaultFile(path=path) if path in self.documents else None

    async def read(self, file: VaultFile) -> str:
        self.reads.append(file.path)
        return self.documents[file.path]


class BufferEditor(_AbstractEditor):
    """Editor over a list of lines with a fixed cursor."""

    def __init__(self, lines: list[str], cursor: EditorPosition | None = None, file_path: str | None = "note.md"):
        self.lines = list(lines)
        last = len(self.lines) - 1
        self.cursor = cursor or EditorPosition(last, len(self.lines[last]))
        self._file_path = file_path
        self.replacements: list[tuple[str, EditorPosition, EditorPosition]] = []

    @property
    def file_path(self) -> str | None:
        return self._file_path

    def get_cursor(self) -> EditorPosition:
        return self.cursor

    def get_line(self, line: int) -> str:
        return self.lines[line]

    def replace_range(self, replacement: str, start: EditorPosition, end: EditorPosition) -> None:
        assert start.line == end.line
        line = self.lines[start.line]
        self.lines[start.line] = line[: start.ch] + replacement + line[end.ch :]
        self.replacements.append((replacement, start, end))


class StaticMetadataCache(_AbstractMetadataCache):
    """Metadata cache returning the same record object on every call, like the host."""

    def __init__(self, records: dict[str, CachedMetadata] | None = None):
        self.records = dict(records or {})

    def get_cache(self, path: str) -> CachedMetadata | None:
        return self.records.get(path)

    def get_file_cache(self, file: VaultFile) -> CachedMetadata | None:
        return self.records.get(file.path)


class RecordingWorkspace(_AbstractWorkspace):
    """Workspace recording navigations and dispatching events synchronously."""

    def __init__(self) -> None:
        self.opened: list[tuple[str, str]] = []
        self.handlers: dict[str, list[Callable[..., Any]]] = {}

    async def open_link_text(
        self,
        linktext: str,
        source_path: str,
        new_leaf: bool = False,
        open_view_state: dict[str, Any] | None = None,
    ) -> None:
        self.opened.append((linktext, source_path))

    def on(self, name: str, callback: Callable[..., Any]) -> EventRef:
        self.handlers.setdefault(name, []).append(callback)
        return EventRef(name=name, callback=callback)

    def off(self, ref: EventRef) -> None:
        self.handlers.get(ref.name, []).remove(ref.callback)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def gfmlinks_home(tmp_path: Path, monkeypatch) -> Path:
    """Point GFMLINKS_HOME at a per-test directory so nothing touches ~/.gfmlinks."""
    home = tmp_path / "gfmlinks_home"
    monkeypatch.setenv("GFMLINKS_HOME", str(home))
    return home


@pytest.fixture
def minimal_config_dict(tmp_path: Path) -> dict:
    vault_dir = tmp_path / "vault"
    vault_dir.mkdir(exist_ok=True)
    return {
        "vault": {"type": "filesystem", "base_dir": str(vault_dir)},
        "adapter": {"translate_on_open": True, "augment_metadata": True, "rewrite_on_edit": True},
        "log": {"level": "DEBUG"},
    }


@pytest.fixture
def config_file(gfmlinks_home: Path, minimal_config_dict: dict) -> Path:
    """Write the minimal config to GFMLINKS_HOME/config.json."""
    gfmlinks_home.mkdir(parents=True, exist_ok=True)
    path = gfmlinks_home / "config.json"
    path.write_text(json.dumps(minimal_config_dict))
    return path


PLUMBING_DOC = "\n".join(
    [
        "# Plumbing Notes",
        "Intro text.",
        "## Pipes & Fittings",
        "### Notes",
        "text",
        "### Notes",
        "#not a heading",
    ]
)


@pytest.fixture
def vault() -> InMemoryVault:
    return InMemoryVault(
        {
            "notes/plumbing.md": PLUMBING_DOC,
            "notes/sub/child.md": "# Child\n[up](../plumbing.md#pipes-fittings)\n",
            "note.md": "# Plumbing Notes\nbody\n",
        }
    )


@pytest.fixture
def workspace() -> RecordingWorkspace:
    return RecordingWorkspace()


@pytest.fixture
def make_editor() -> type[BufferEditor]:
    return BufferEditor


@pytest.fixture
def make_vault() -> type[InMemoryVault]:
    return InMemoryVault


@pytest.fixture
def make_metadata_cache() -> type[StaticMetadataCache]:
    return StaticMetadataCache
