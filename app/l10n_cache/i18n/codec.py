"""Artifact (de)serialization.

Artifacts are Jed-style ``locale_data`` JSON documents::

    {
        "translation-revision-date": 1700000000,
        "generator": "system",
        "domain": "messages",
        "locale_data": {
            "messages": {
                "": {"domain": "messages", "plural-forms": "...", "lang": "fr_FR"},
                "Hello": ["Bonjour"]
            }
        }
    }

The metadata row under the empty key shares its mapping with translation
rows on disk; in memory it is lifted into CatalogMetadata.
"""

import json
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from l10n_cache.i18n.errors import ArtifactCorrupt
from l10n_cache.i18n.models import (
    DEFAULT_PLURAL_RULE,
    METADATA_KEY,
    Artifact,
    CatalogMetadata,
    TranslationTable,
)


class MetadataRow(BaseModel):
    """The reserved ``""`` row of the messages mapping."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    domain: str = "messages"
    plural_forms: str = Field(default=DEFAULT_PLURAL_RULE, alias="plural-forms")
    lang: str = ""


class LocaleData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: Dict[str, Any]


class ArtifactDocument(BaseModel):
    """Envelope of an artifact document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    revision_date: int = Field(alias="translation-revision-date")
    generator: str
    domain: str
    locale_data: LocaleData


class ArtifactCodec:
    """Encodes and decodes artifacts.

    Encoding is deterministic: the metadata row first, translation keys
    sorted, fixed indentation. The same catalog therefore always produces
    the same bytes.

    Attributes:
        indent: JSON indentation width.
    """

    def __init__(self, indent: int = 4):
        self.indent = indent

    def encode(self, metadata: CatalogMetadata, messages: TranslationTable) -> bytes:
        """Serialize metadata and a translation table to artifact bytes.

        Args:
            metadata: Catalog metadata for the envelope and the "" row.
            messages: Translation table; an empty key in it is ignored.

        Returns:
            UTF-8 encoded JSON document.
        """
        rows: Dict[str, Any] = {
            METADATA_KEY: {
                "domain": metadata.domain,
                "plural-forms": metadata.plural_rule,
                "lang": metadata.locale,
            }
        }
        for key in sorted(messages):
            if key != METADATA_KEY:
                rows[key] = list(messages[key])

        document = {
            "translation-revision-date": metadata.revision_time,
            "generator": metadata.generator,
            "domain": metadata.domain,
            "locale_data": {"messages": rows},
        }
        return json.dumps(document, indent=self.indent, ensure_ascii=False).encode("utf-8")

    def decode(self, data: bytes) -> Artifact:
        """Parse artifact bytes.

        Args:
            data: UTF-8 encoded JSON document.

        Returns:
            Artifact with metadata lifted out of the messages mapping.

        Raises:
            ArtifactCorrupt: If the bytes are not a well-formed artifact.
        """
        try:
            document = ArtifactDocument.model_validate_json(data)
            rows = dict(document.locale_data.messages)
            row = MetadataRow.model_validate(rows.pop(METADATA_KEY, {}))
        except (ValidationError, UnicodeDecodeError) as e:
            raise ArtifactCorrupt(f"Invalid artifact document: {e}") from e

        messages: TranslationTable = {}
        for key, variants in rows.items():
            messages[key] = self._variants(key, variants)

        metadata = CatalogMetadata(
            revision_time=document.revision_date,
            generator=document.generator,
            domain=document.domain,
            locale=row.lang,
            plural_rule=row.plural_forms,
        )
        return Artifact(metadata=metadata, messages=messages)

    @staticmethod
    def _variants(key: str, variants: Any) -> List[str]:
        if not isinstance(variants, list) or not variants:
            raise ArtifactCorrupt(f"Entry {key!r} is not a non-empty list of strings")
        if not all(isinstance(v, str) for v in variants):
            raise ArtifactCorrupt(f"Entry {key!r} contains non-string variants")
        return variants
