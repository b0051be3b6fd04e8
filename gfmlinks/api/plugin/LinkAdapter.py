"""GFM heading link adapter for a host application (UNO: single class)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ...constants import EDITOR_CHANGE_EVENT
from ...utils.configure_logging import configure_logging
from ...utils.get_logger import get_logger
from ..config.GfmLinksConfig import GfmLinksConfig
from ..editor.EditRewriter import EditRewriter
from ..link.LinkTranslator import LinkTranslator
from ..metadata._AbstractMetadataCache import _AbstractMetadataCache
from ..metadata.CachedMetadata import CachedMetadata
from ..metadata.MetadataAugmenter import MetadataAugmenter
from ..vault._AbstractVault import _AbstractVault
from ..vault.FilesystemVault import FilesystemVault
from ..vault.VaultFile import VaultFile
from ..workspace._AbstractWorkspace import _AbstractWorkspace
from ..workspace.EventRef import EventRef
from .Interceptor import Interceptor

logger = logging.getLogger(__name__)


class LinkAdapter:
    """Hooks the heading-link engine into a host for its whole lifetime.

    Intercepts link opening and metadata lookups on the given host instances
    and subscribes the live edit rewriter. unload() restores every original
    host method. Also usable as a context manager.
    """

    def __init__(
        self,
        vault: _AbstractVault,
        metadata_cache: _AbstractMetadataCache,
        workspace: _AbstractWorkspace,
        config: GfmLinksConfig | None = None,
    ):
        self.vault = vault
        self.metadata_cache = metadata_cache
        self.workspace = workspace
        self.config = config or GfmLinksConfig()
        self.translator = LinkTranslator(vault)
        self.augmenter = MetadataAugmenter()
        self.rewriter = EditRewriter(self.translator)
        self._interceptors: list[Interceptor] = []
        self._event_refs: list[EventRef] = []
        self._loaded = False

    @classmethod
    def from_config(
        cls,
        metadata_cache: _AbstractMetadataCache,
        workspace: _AbstractWorkspace,
        config: GfmLinksConfig,
    ) -> LinkAdapter:
        """Build an adapter reading notes from the configured filesystem vault."""
        if config.vault is None:
            raise ValueError("vault section is required in config")
        return cls(FilesystemVault.from_config(config.vault), metadata_cache, workspace, config)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        if self._loaded:
            return
        log_config = self.config.log
        configure_logging(level=log_config.level, max_bytes=log_config.max_bytes, backup_count=log_config.backup_count)

        features = self.config.adapter
        if features.translate_on_open:
            self._intercept(self.workspace, "open_link_text", self._wrap_open_link_text)
        if features.augment_metadata:
            self._intercept(self.metadata_cache, "get_cache", self._wrap_get_cache)
            self._intercept(self.metadata_cache, "get_file_cache", self._wrap_get_file_cache)
        if features.rewrite_on_edit:
            self._event_refs.append(self.workspace.on(EDITOR_CHANGE_EVENT, self.rewriter.on_editor_change))

        self._loaded = True
        get_logger("plugin").info(
            "Link adapter loaded (%d interceptors, %d event subscriptions)",
            len(self._interceptors),
            len(self._event_refs),
        )

    def unload(self) -> None:
        if not self._loaded:
            return
        # Reverse order so stacked wrappers unwind cleanly
        for interceptor in reversed(self._interceptors):
            interceptor.remove()
        for ref in self._event_refs:
            self.workspace.off(ref)
        self._interceptors = []
        self._event_refs = []
        self._loaded = False
        get_logger("plugin").info("Link adapter unloaded")

    def __enter__(self) -> LinkAdapter:
        self.load()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.unload()

    def _intercept(self, target: object, name: str, wrap: Callable[[Callable[..., Any]], Callable[..., Any]]) -> None:
        interceptor = Interceptor(target, name, wrap)
        interceptor.install()
        self._interceptors.append(interceptor)

    # Wrappers
    def _wrap_open_link_text(self, original: Callable[..., Any]) -> Callable[..., Any]:
        async def open_link_text(
            linktext: str,
            source_path: str,
            new_leaf: bool = False,
            open_view_state: dict[str, Any] | None = None,
        ) -> Any:
            translated = await self.translator.translate_link(linktext, source_path)
            logger.debug("open_link_text %r -> %r (source %s)", linktext, translated, source_path)
            return await original(translated, source_path, new_leaf, open_view_state)

        return open_link_text

    def _wrap_get_cache(self, original: Callable[[str], CachedMetadata | None]) -> Callable[[str], CachedMetadata | None]:
        def get_cache(path: str) -> CachedMetadata | None:
            return self.augmenter.augment(original(path), path)

        return get_cache

    def _wrap_get_file_cache(
        self, original: Callable[[VaultFile], CachedMetadata | None]
    ) -> Callable[[VaultFile], CachedMetadata | None]:
        def get_file_cache(file: VaultFile) -> CachedMetadata | None:
            return self.augmenter.augment(original(file), file)

        return get_file_cache
