"""Translation artifact settings."""

from pydantic import Field, field_validator

from l10n_cache.infrastructure.configuration.base import FeatureSettings


class ArtifactSettings(FeatureSettings):
    """Configuration for the derived JSON translation artifacts.

    Controls how artifacts are addressed next to their compiled catalogs and
    which envelope values are written into them.

    Environment Variables:
        L10N_CACHE_ENABLED: Serve translations through the artifact cache (default: True)
        L10N_ARTIFACT_EXTENSION: Extension swapped in for the catalog's (default: .json)
        L10N_ARTIFACT_GENERATOR: Value of the "generator" field (default: system)
        L10N_ARTIFACT_DOMAIN: Value of the "domain" field (default: messages)
        L10N_ARTIFACT_INDENT: JSON indentation width (default: 4)

    Example:
        ```python
        from l10n_cache.infrastructure.configuration import get_settings

        settings = get_settings()

        if settings.artifacts.enabled:
            extension = settings.artifacts.extension
        ```
    """

    enabled: bool = Field(
        default=True,
        alias="L10N_CACHE_ENABLED",
        description="Serve translations through the artifact cache",
    )
    extension: str = Field(
        default=".json",
        alias="L10N_ARTIFACT_EXTENSION",
        description="File extension of derived artifacts",
    )
    generator: str = Field(
        default="system",
        alias="L10N_ARTIFACT_GENERATOR",
        description="Generator name recorded in artifacts",
    )
    domain: str = Field(
        default="messages",
        alias="L10N_ARTIFACT_DOMAIN",
        description="Domain name recorded in artifacts (Jed convention)",
    )
    indent: int = Field(
        default=4,
        alias="L10N_ARTIFACT_INDENT",
        description="Indentation width of the artifact JSON document",
    )

    @field_validator("extension")
    @classmethod
    def _ensure_leading_dot(cls, value: str) -> str:
        if not value.startswith("."):
            return f".{value}"
        return value
