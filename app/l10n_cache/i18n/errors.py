"""Errors raised by the translation artifact cache.

None of these reach lookup callers: TranslationCache.resolve absorbs them
and reports a miss instead.
"""

from pathlib import Path
from typing import Union


class L10nCacheError(Exception):
    """Base class for translation cache errors."""


class CatalogUnreadable(L10nCacheError):
    """Compiled catalog is missing or malformed."""

    def __init__(self, catalog_path: Union[str, Path], reason: str):
        self.catalog_path = str(catalog_path)
        self.reason = reason
        super().__init__(f"Cannot read catalog {self.catalog_path}: {reason}")


class ArtifactWriteFailed(L10nCacheError):
    """Derived artifact could not be persisted (disk full, permissions)."""

    def __init__(self, artifact_path: Union[str, Path]):
        self.artifact_path = str(artifact_path)
        super().__init__(f"Failed to write artifact {self.artifact_path}")


class ArtifactCorrupt(L10nCacheError):
    """Artifact bytes do not decode to the expected document shape."""
