"""Configuration module - public API.

Centralized configuration for l10n-cache using Pydantic BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    ArtifactSettings: Artifact cache settings class
    get_settings: Cached settings singleton

Example:
    ```python
    from l10n_cache.infrastructure.configuration import get_settings

    settings = get_settings()
    indent = settings.artifacts.indent
    ```
"""

from l10n_cache.infrastructure.configuration.artifacts import ArtifactSettings
from l10n_cache.infrastructure.configuration.settings import Settings, get_settings

__all__ = ["Settings", "ArtifactSettings", "get_settings"]
