"""Per-domain translation registry.

Holds the merged translation table of every loaded text domain and answers
plain, contextual and plural lookups against it without touching the
filesystem.
"""

from typing import Dict, List, Optional

from l10n_cache.i18n.models import (
    METADATA_KEY,
    CatalogMetadata,
    TranslationTable,
    contextual_key,
)
from l10n_cache.infrastructure.logging import get_module_logger

logger = get_module_logger()


class DomainRegistry:
    """Owns the merged translation tables, one per text domain.

    A registry lives for the whole process: domains are created on their
    first load and grown by later loads, never replaced wholesale.

    Lookups are total. An unknown domain, an unknown key or a missing
    plural form all return None ("no override"), so callers always fall
    back to their own default translation.

    Attributes:
        tables: Text domain to merged TranslationTable.
        metadata: Text domain to the CatalogMetadata of its latest load.
    """

    def __init__(self):
        self.tables: Dict[str, TranslationTable] = {}
        self.metadata: Dict[str, CatalogMetadata] = {}

    def load(
        self,
        domain: str,
        table: TranslationTable,
        metadata: Optional[CatalogMetadata] = None,
    ) -> None:
        """Merge a translation table into a domain.

        Later loads override earlier ones on key collisions.

        Args:
            domain: Text domain to merge into.
            table: Translation table to merge; the metadata key is ignored.
            metadata: Optional metadata of the catalog the table came from.
        """
        existing = self.tables.setdefault(domain, {})
        for key, variants in table.items():
            if key == METADATA_KEY:
                continue
            existing[key] = list(variants)

        if metadata is not None:
            self.metadata[domain] = metadata

        logger.info(
            "domain_loaded",
            domain=domain,
            loaded_count=len(table),
            entry_count=len(existing),
        )

    def lookup_plain(self, domain: str, text: str) -> Optional[str]:
        """Translate a plain string.

        Args:
            domain: Text domain.
            text: Source text.

        Returns:
            First variant of the entry, or None.
        """
        return self._variant(domain, text, 0)

    def lookup_contextual(self, domain: str, context: str, text: str) -> Optional[str]:
        """Translate a string with context.

        The entry key is context and text concatenated without a separator.

        Returns:
            First variant of the entry, or None.
        """
        return self._variant(domain, contextual_key(context, text), 0)

    def lookup_plural(
        self, domain: str, single: str, plural: str, count: int
    ) -> Optional[str]:
        """Translate a string with singular and plural forms.

        Only ``single`` addresses the entry; ``plural`` is accepted for
        parity with ngettext-style calls. The catalog's plural rule is not
        evaluated: a count of exactly one selects the first variant, any
        other count the second.

        Args:
            domain: Text domain.
            single: Singular source text.
            plural: Plural source text (unused).
            count: Number deciding between the forms.

        Returns:
            Selected variant, or None.
        """
        return self._variant(domain, single, 0 if count == 1 else 1)

    def has_domain(self, domain: str) -> bool:
        return domain in self.tables

    def domains(self) -> List[str]:
        return list(self.tables.keys())

    def get_table(self, domain: str) -> TranslationTable:
        """Get a copy of a domain's merged table (empty if unknown)."""
        return {key: list(variants) for key, variants in self.tables.get(domain, {}).items()}

    def get_metadata(self, domain: str) -> Optional[CatalogMetadata]:
        return self.metadata.get(domain)

    def clear(self) -> None:
        """Drop every loaded domain."""
        self.tables.clear()
        self.metadata.clear()
        logger.info("registry_cleared")

    def _variant(self, domain: str, key: str, index: int) -> Optional[str]:
        variants = self.tables.get(domain, {}).get(key)
        if not variants or index >= len(variants):
            return None
        return variants[index]
