"""Translation models for the artifact cache.

Defines the data structures shared by the catalog reader, artifact codec,
translation cache and domain registry.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

DEFAULT_PLURAL_RULE = "nplurals=2; plural=n != 1;"

# Catalog metadata lives under the empty key in both catalogs and artifacts.
METADATA_KEY = ""

TranslationTable = Dict[str, List[str]]


def contextual_key(context: str, text: str) -> str:
    """Build the table key for a message with context.

    Context and text are concatenated without a separator, so different
    splits of the same string address the same entry.

    Args:
        context: Message context (e.g., "menu").
        text: Source text (e.g., "File").

    Returns:
        Table key (e.g., "menuFile").
    """
    return f"{context}{text}"


@dataclass(frozen=True)
class CatalogMetadata:
    """Catalog-level metadata stored alongside a translation table.

    Attributes:
        revision_time: Catalog modification time (epoch seconds) the artifact was built from.
        generator: Name of the artifact generator.
        domain: Domain recorded in the artifact envelope.
        locale: Locale of the catalog.
        plural_rule: Plural-Forms expression of the catalog (never evaluated).
    """

    revision_time: int
    generator: str = "system"
    domain: str = "messages"
    locale: str = ""
    plural_rule: str = DEFAULT_PLURAL_RULE


@dataclass
class Artifact:
    """Decoded artifact: metadata plus the translation table.

    The reserved metadata row is carried in ``metadata``; ``messages`` never
    contains the empty key.
    """

    metadata: CatalogMetadata
    messages: TranslationTable = field(default_factory=dict)


@dataclass
class ParsedCatalog:
    """Output of the compiled catalog reader.

    Attributes:
        headers: Catalog headers with lower-cased names (e.g., "plural-forms").
        entries: Message key to translation variants.
    """

    headers: Dict[str, str] = field(default_factory=dict)
    entries: TranslationTable = field(default_factory=dict)

    @property
    def plural_rule(self) -> str:
        """Plural-Forms header, or the default two-form rule."""
        return self.headers.get("plural-forms") or DEFAULT_PLURAL_RULE


class ValidationState(str, Enum):
    """Outcome of checking an existing artifact against its catalog."""

    FRESH = "fresh"
    STALE = "stale"
    MISSING = "missing"


@dataclass
class ValidationResult:
    """Result of artifact validation.

    Attributes:
        state: ValidationState of the artifact.
        artifact: Decoded artifact, only set when state is FRESH.
    """

    state: ValidationState
    artifact: Optional[Artifact] = None

    @property
    def is_fresh(self) -> bool:
        return self.state == ValidationState.FRESH

    @classmethod
    def fresh(cls, artifact: Artifact) -> "ValidationResult":
        return cls(state=ValidationState.FRESH, artifact=artifact)

    @classmethod
    def stale(cls) -> "ValidationResult":
        return cls(state=ValidationState.STALE)

    @classmethod
    def missing(cls) -> "ValidationResult":
        return cls(state=ValidationState.MISSING)
