"""i18n artifact cache.

Serves translations from compiled gettext catalogs through derived JSON
artifacts, regenerating an artifact whenever its catalog is newer.

Main components:
- models: CatalogMetadata, Artifact, ParsedCatalog, ValidationResult
- reader: CatalogReader and MoCatalogReader
- store: FileSystem, LocalFileSystem and ArtifactStore
- codec: ArtifactCodec for the artifact JSON document
- cache: TranslationCache (validate, regenerate, resolve)
- registry: DomainRegistry with plain, contextual and plural lookups
- hooks: TranslationHooks plugin and L10nHost facade
"""

from l10n_cache.i18n.cache import TranslationCache
from l10n_cache.i18n.codec import ArtifactCodec
from l10n_cache.i18n.errors import (
    ArtifactCorrupt,
    ArtifactWriteFailed,
    CatalogUnreadable,
    L10nCacheError,
)
from l10n_cache.i18n.factory import create_host, create_translation_cache
from l10n_cache.i18n.hooks import L10nHost, TranslationHooks
from l10n_cache.i18n.models import (
    DEFAULT_PLURAL_RULE,
    Artifact,
    CatalogMetadata,
    ParsedCatalog,
    TranslationTable,
    ValidationResult,
    ValidationState,
)
from l10n_cache.i18n.reader import CatalogReader, MoCatalogReader
from l10n_cache.i18n.registry import DomainRegistry
from l10n_cache.i18n.store import ArtifactStore, FileSystem, LocalFileSystem

__all__ = [
    "DEFAULT_PLURAL_RULE",
    "Artifact",
    "ArtifactCodec",
    "ArtifactCorrupt",
    "ArtifactStore",
    "ArtifactWriteFailed",
    "CatalogMetadata",
    "CatalogReader",
    "CatalogUnreadable",
    "DomainRegistry",
    "FileSystem",
    "L10nCacheError",
    "L10nHost",
    "LocalFileSystem",
    "MoCatalogReader",
    "ParsedCatalog",
    "TranslationCache",
    "TranslationHooks",
    "TranslationTable",
    "ValidationResult",
    "ValidationState",
    "create_host",
    "create_translation_cache",
]
