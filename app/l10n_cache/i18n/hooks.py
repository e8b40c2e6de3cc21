"""Hook adapter between a translating host and the artifact cache.

TranslationHooks implements the l10n hook specs on top of a TranslationCache
and a DomainRegistry. L10nHost is the host side: it fires the hooks and
supplies the default translation whenever no hook overrides it.
"""

import struct
from gettext import GNUTranslations, NullTranslations
from pathlib import Path
from typing import Dict, Optional, Union

import pluggy

from l10n_cache.i18n.cache import TranslationCache
from l10n_cache.i18n.registry import DomainRegistry
from l10n_cache.infrastructure.logging import bind_load_context, get_module_logger
from l10n_cache.infrastructure.plugins import hookimpl

logger = get_module_logger()


class TranslationHooks:
    """Plugin serving translations from the artifact cache.

    Attributes:
        cache: TranslationCache resolving catalogs to tables.
        registry: DomainRegistry the loaded tables are merged into.
        enabled: When False, loads are left to the host.
    """

    def __init__(
        self,
        cache: TranslationCache,
        registry: DomainRegistry,
        enabled: bool = True,
    ):
        self.cache = cache
        self.registry = registry
        self.enabled = enabled

    @hookimpl
    def l10n_load_textdomain(
        self, domain: str, catalog_path: str, locale: str
    ) -> Optional[bool]:
        if not self.enabled:
            return None

        with bind_load_context(domain=domain, catalog_path=catalog_path, locale=locale):
            artifact = self.cache.resolve_artifact(domain, catalog_path, locale)
            if artifact is None:
                logger.info("domain_load_fallback")
                return False

            self.registry.load(domain, artifact.messages, artifact.metadata)
        return True

    @hookimpl
    def l10n_gettext(self, translation: str, text: str, domain: str) -> Optional[str]:
        return self.registry.lookup_plain(domain, text)

    @hookimpl
    def l10n_gettext_with_context(
        self, translation: str, text: str, context: str, domain: str
    ) -> Optional[str]:
        return self.registry.lookup_contextual(domain, context, text)

    @hookimpl
    def l10n_ngettext(
        self, translation: str, single: str, plural: str, count: int, domain: str
    ) -> Optional[str]:
        return self.registry.lookup_plural(domain, single, plural, count)


class L10nHost:
    """Host-side facade firing the l10n hooks.

    When no plugin takes over a domain load, the host reads the compiled
    catalog itself with ``gettext``; that catalog then provides the default
    translations handed to the lookup hooks.

    Attributes:
        plugin_manager: pluggy PluginManager with the l10n hook specs.
        fallbacks: Text domain to the host's own gettext translations.
    """

    def __init__(self, plugin_manager: pluggy.PluginManager):
        self.plugin_manager = plugin_manager
        self.fallbacks: Dict[str, NullTranslations] = {}

    def load_textdomain(
        self, domain: str, catalog_path: Union[str, Path], locale: str
    ) -> bool:
        """Load a text domain from a compiled catalog.

        Args:
            domain: Text domain to load.
            catalog_path: Path of the compiled catalog.
            locale: Locale of the catalog.

        Returns:
            True if translations were loaded by a plugin or by the host.
        """
        hook = self.plugin_manager.hook
        catalog_path = str(catalog_path)
        remapped = hook.l10n_catalog_path(domain=domain, catalog_path=catalog_path)
        if remapped:
            catalog_path = str(remapped)

        hook.l10n_textdomain_loading(domain=domain, catalog_path=catalog_path)

        if hook.l10n_load_textdomain(domain=domain, catalog_path=catalog_path, locale=locale):
            return True
        return self._load_fallback(domain, catalog_path)

    def gettext(self, text: str, domain: str = "default") -> str:
        translation = self._translations(domain).gettext(text)
        override = self.plugin_manager.hook.l10n_gettext(
            translation=translation, text=text, domain=domain
        )
        return translation if override is None else override

    def pgettext(self, context: str, text: str, domain: str = "default") -> str:
        translation = self._translations(domain).pgettext(context, text)
        override = self.plugin_manager.hook.l10n_gettext_with_context(
            translation=translation, text=text, context=context, domain=domain
        )
        return translation if override is None else override

    def ngettext(
        self, single: str, plural: str, count: int, domain: str = "default"
    ) -> str:
        translation = self._translations(domain).ngettext(single, plural, count)
        override = self.plugin_manager.hook.l10n_ngettext(
            translation=translation,
            single=single,
            plural=plural,
            count=count,
            domain=domain,
        )
        return translation if override is None else override

    def _translations(self, domain: str) -> NullTranslations:
        return self.fallbacks.get(domain) or NullTranslations()

    def _load_fallback(self, domain: str, catalog_path: str) -> bool:
        try:
            with open(catalog_path, "rb") as f:
                translations = GNUTranslations(f)
        except (OSError, struct.error, ValueError, LookupError, IndexError) as e:
            logger.warning(
                "fallback_catalog_load_failed",
                domain=domain,
                catalog_path=catalog_path,
                error=str(e),
            )
            return False

        # Newest catalog answers first, earlier ones stay reachable
        previous = self.fallbacks.get(domain)
        if previous is not None:
            translations.add_fallback(previous)
        self.fallbacks[domain] = translations

        logger.info("fallback_catalog_loaded", domain=domain, catalog_path=catalog_path)
        return True
