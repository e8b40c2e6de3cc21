"""Factory functions for creating i18n components.

Provides convenience functions for wiring the artifact cache with settings
suitable for the application.
"""

from typing import Optional, Tuple

import pluggy

from l10n_cache.i18n.cache import TranslationCache
from l10n_cache.i18n.codec import ArtifactCodec
from l10n_cache.i18n.hooks import L10nHost, TranslationHooks
from l10n_cache.i18n.reader import CatalogReader, MoCatalogReader
from l10n_cache.i18n.registry import DomainRegistry
from l10n_cache.i18n.store import ArtifactStore, FileSystem, LocalFileSystem
from l10n_cache.infrastructure.configuration import ArtifactSettings, get_settings
from l10n_cache.infrastructure.logging import get_module_logger
from l10n_cache.infrastructure.plugins import create_plugin_manager

logger = get_module_logger()


def create_translation_cache(
    settings: Optional[ArtifactSettings] = None,
    filesystem: Optional[FileSystem] = None,
    reader: Optional[CatalogReader] = None,
) -> TranslationCache:
    """Create and configure a TranslationCache.

    Args:
        settings: Artifact settings (default: from get_settings()).
        filesystem: FileSystem collaborator (default: LocalFileSystem).
        reader: Compiled catalog reader (default: MoCatalogReader).

    Returns:
        TranslationCache: Configured cache instance

    Usage:
        cache = create_translation_cache()
        table = cache.resolve("default", "/l10n/fr_FR.mo", "fr_FR")
    """
    settings = settings or get_settings().artifacts
    store = ArtifactStore(filesystem or LocalFileSystem(), extension=settings.extension)

    cache = TranslationCache(
        store=store,
        reader=reader or MoCatalogReader(),
        codec=ArtifactCodec(indent=settings.indent),
        generator=settings.generator,
        artifact_domain=settings.domain,
    )
    logger.info(
        "translation_cache_created",
        extension=settings.extension,
        generator=settings.generator,
    )
    return cache


def create_host(
    settings: Optional[ArtifactSettings] = None,
    filesystem: Optional[FileSystem] = None,
    registry: Optional[DomainRegistry] = None,
    plugin_manager: Optional[pluggy.PluginManager] = None,
) -> Tuple[L10nHost, TranslationHooks]:
    """Create a host with the artifact cache plugin registered.

    Args:
        settings: Artifact settings (default: from get_settings()).
        filesystem: FileSystem collaborator (default: LocalFileSystem).
        registry: DomainRegistry to load into (default: a new registry).
        plugin_manager: Plugin manager to register with (default: a new one).

    Returns:
        Tuple of the host facade and the registered TranslationHooks plugin.

    Usage:
        host, hooks = create_host()
        host.load_textdomain("default", "/l10n/fr_FR.mo", "fr_FR")
        host.gettext("Hello")
    """
    settings = settings or get_settings().artifacts
    hooks = TranslationHooks(
        cache=create_translation_cache(settings=settings, filesystem=filesystem),
        registry=registry if registry is not None else DomainRegistry(),
        enabled=settings.enabled,
    )

    pm = plugin_manager or create_plugin_manager()
    pm.register(hooks)

    logger.info("translation_host_created", cache_enabled=settings.enabled)
    return L10nHost(pm), hooks
