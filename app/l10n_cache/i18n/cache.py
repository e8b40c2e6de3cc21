"""Translation cache backed by derived JSON artifacts.

Core component of the artifact cache: decides whether the artifact next to
a compiled catalog is still valid and regenerates it from the catalog when
it is missing or older than the catalog.
"""

from pathlib import Path
from typing import Optional, Union

from l10n_cache.i18n.codec import ArtifactCodec
from l10n_cache.i18n.errors import ArtifactCorrupt, ArtifactWriteFailed, CatalogUnreadable
from l10n_cache.i18n.models import (
    METADATA_KEY,
    Artifact,
    CatalogMetadata,
    TranslationTable,
    ValidationResult,
    ValidationState,
)
from l10n_cache.i18n.reader import CatalogReader
from l10n_cache.i18n.store import ArtifactStore
from l10n_cache.infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationCache:
    """Serves translation tables through derived artifacts.

    Stateless between calls: every result is a function of the arguments and
    the files on disk. ``resolve`` composes the two phases, ``validate`` and
    ``regenerate``, which can also be driven separately.

    Attributes:
        store: ArtifactStore for catalog and artifact I/O.
        reader: CatalogReader for compiled catalogs.
        codec: ArtifactCodec for artifact bytes.
        generator: Generator name written into new artifacts.
        artifact_domain: Domain written into new artifacts. Independent of
            the text domain being loaded.
    """

    def __init__(
        self,
        store: ArtifactStore,
        reader: CatalogReader,
        codec: Optional[ArtifactCodec] = None,
        generator: str = "system",
        artifact_domain: str = "messages",
    ):
        self.store = store
        self.reader = reader
        self.codec = codec or ArtifactCodec()
        self.generator = generator
        self.artifact_domain = artifact_domain

    def resolve(
        self, domain: str, catalog_path: Union[str, Path], locale: str
    ) -> Optional[TranslationTable]:
        """Get an up-to-date translation table for a catalog.

        A missing artifact is generated; a stale or undecodable one is
        deleted and regenerated in the same call.

        Args:
            domain: Text domain being loaded (for logging only).
            catalog_path: Path of the compiled catalog.
            locale: Locale of the catalog.

        Returns:
            Translation table without the metadata key, or None when no
            translations could be produced. None means the caller should fall
            back to its own translation source.
        """
        artifact = self.resolve_artifact(domain, catalog_path, locale)
        if artifact is None:
            return None
        return artifact.messages

    def resolve_artifact(
        self, domain: str, catalog_path: Union[str, Path], locale: str
    ) -> Optional[Artifact]:
        """Like resolve, but keeps the catalog metadata alongside the table."""
        artifact_path = self.store.artifact_path(catalog_path)
        result = self.validate(catalog_path)

        if result.is_fresh:
            logger.debug(
                "artifact_fresh",
                domain=domain,
                artifact_path=str(artifact_path),
                entry_count=len(result.artifact.messages),
            )
            return result.artifact

        if result.state == ValidationState.STALE:
            logger.info("artifact_stale", domain=domain, artifact_path=str(artifact_path))
            self.store.delete(artifact_path)

        try:
            return self._build_artifact(catalog_path, locale)
        except CatalogUnreadable as e:
            logger.warning(
                "catalog_unreadable",
                domain=domain,
                catalog_path=e.catalog_path,
                reason=e.reason,
            )
        except ArtifactWriteFailed as e:
            logger.warning(
                "artifact_write_failed",
                domain=domain,
                artifact_path=e.artifact_path,
            )
        return None

    def validate(self, catalog_path: Union[str, Path]) -> ValidationResult:
        """Check the artifact for a catalog.

        Args:
            catalog_path: Path of the compiled catalog.

        Returns:
            MISSING if there is no artifact, STALE if the catalog is newer
            than the artifact or the artifact cannot be decoded, FRESH with
            the decoded artifact otherwise. When the catalog itself is gone
            the artifact is the only remaining source and counts as FRESH.
        """
        artifact_path = self.store.artifact_path(catalog_path)
        if not self.store.exists(artifact_path):
            return ValidationResult.missing()

        try:
            artifact = self.codec.decode(self.store.read(artifact_path))
        except FileNotFoundError:
            return ValidationResult.missing()
        except OSError as e:
            logger.warning("artifact_unreadable", artifact_path=str(artifact_path), error=str(e))
            return ValidationResult.stale()
        except ArtifactCorrupt as e:
            logger.warning("artifact_corrupt", artifact_path=str(artifact_path), error=str(e))
            return ValidationResult.stale()

        try:
            catalog_mtime = self.store.catalog_mtime(catalog_path)
        except FileNotFoundError:
            logger.info("catalog_missing_serving_artifact", catalog_path=str(catalog_path))
            return ValidationResult.fresh(artifact)
        except OSError as e:
            # Same policy as a vanished catalog: the artifact is all we can see
            logger.warning(
                "catalog_stat_failed", catalog_path=str(catalog_path), error=str(e)
            )
            return ValidationResult.fresh(artifact)

        if catalog_mtime > artifact.metadata.revision_time:
            return ValidationResult.stale()
        return ValidationResult.fresh(artifact)

    def regenerate(self, catalog_path: Union[str, Path], locale: str) -> TranslationTable:
        """Build and persist the artifact for a catalog.

        Args:
            catalog_path: Path of the compiled catalog.
            locale: Locale recorded in the artifact's metadata row.

        Returns:
            The new translation table without the metadata key.

        Raises:
            CatalogUnreadable: If the catalog is missing or malformed. Nothing
                is written in that case.
            ArtifactWriteFailed: If the artifact could not be written.
        """
        return self._build_artifact(catalog_path, locale).messages

    def _build_artifact(self, catalog_path: Union[str, Path], locale: str) -> Artifact:
        try:
            revision_time = self.store.catalog_mtime(catalog_path)
            data = self.store.read_catalog(catalog_path)
        except FileNotFoundError as e:
            raise CatalogUnreadable(catalog_path, "catalog not found") from e
        except OSError as e:
            raise CatalogUnreadable(catalog_path, str(e)) from e

        catalog = self.reader.parse(data, source=catalog_path)

        metadata = CatalogMetadata(
            revision_time=revision_time,
            generator=self.generator,
            domain=self.artifact_domain,
            locale=locale,
            plural_rule=catalog.plural_rule,
        )
        messages: TranslationTable = {
            key: list(catalog.entries[key])
            for key in sorted(catalog.entries)
            if key != METADATA_KEY and catalog.entries[key]
        }

        artifact_path = self.store.artifact_path(catalog_path)
        if not self.store.write(artifact_path, self.codec.encode(metadata, messages)):
            raise ArtifactWriteFailed(artifact_path)

        logger.info(
            "artifact_regenerated",
            artifact_path=str(artifact_path),
            revision_time=revision_time,
            entry_count=len(messages),
        )
        return Artifact(metadata=metadata, messages=messages)
