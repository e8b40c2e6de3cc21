"""Unit tests for l10n_cache.infrastructure.configuration module.

Tests cover:
- ArtifactSettings validation and defaults
- Settings class initialization
- get_settings() caching
"""

import pytest

from l10n_cache.infrastructure.configuration import (
    ArtifactSettings,
    Settings,
    get_settings,
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env and L10N_* variables out of these tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "L10N_CACHE_ENABLED",
        "L10N_ARTIFACT_EXTENSION",
        "L10N_ARTIFACT_GENERATOR",
        "L10N_ARTIFACT_DOMAIN",
        "L10N_ARTIFACT_INDENT",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
class TestArtifactSettings:
    """Test suite for ArtifactSettings configuration."""

    def test_artifact_settings_defaults(self):
        artifacts = ArtifactSettings()

        assert artifacts.enabled is True
        assert artifacts.extension == ".json"
        assert artifacts.generator == "system"
        assert artifacts.domain == "messages"
        assert artifacts.indent == 4

    def test_artifact_settings_custom_values(self, monkeypatch):
        monkeypatch.setenv("L10N_CACHE_ENABLED", "false")
        monkeypatch.setenv("L10N_ARTIFACT_EXTENSION", ".l10n.json")
        monkeypatch.setenv("L10N_ARTIFACT_GENERATOR", "WordPress")
        monkeypatch.setenv("L10N_ARTIFACT_DOMAIN", "jed")
        monkeypatch.setenv("L10N_ARTIFACT_INDENT", "2")

        artifacts = ArtifactSettings()

        assert artifacts.enabled is False
        assert artifacts.extension == ".l10n.json"
        assert artifacts.generator == "WordPress"
        assert artifacts.domain == "jed"
        assert artifacts.indent == 2

    def test_artifact_settings_partial_override(self, monkeypatch):
        monkeypatch.setenv("L10N_ARTIFACT_INDENT", "0")

        artifacts = ArtifactSettings()

        assert artifacts.indent == 0
        assert artifacts.extension == ".json"

    def test_artifact_settings_extension_gets_leading_dot(self, monkeypatch):
        monkeypatch.setenv("L10N_ARTIFACT_EXTENSION", "json")

        assert ArtifactSettings().extension == ".json"

    def test_artifact_settings_reads_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("L10N_ARTIFACT_GENERATOR=from-dotenv\n")

        assert ArtifactSettings().generator == "from-dotenv"

    def test_artifact_settings_rejects_bad_indent(self, monkeypatch):
        monkeypatch.setenv("L10N_ARTIFACT_INDENT", "wide")

        with pytest.raises(ValueError):
            ArtifactSettings()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_instantiates_artifacts(self):
        settings = Settings()

        assert isinstance(settings.artifacts, ArtifactSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_accepts_artifact_override(self):
        artifacts = ArtifactSettings(L10N_ARTIFACT_INDENT=2)

        assert Settings(artifacts=artifacts).artifacts.indent == 2

    def test_is_production_without_prefix(self):
        assert Settings().is_production is True

    def test_is_not_production_with_prefix(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "dev-")

        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_get_settings_cache_clear_reloads(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("L10N_ARTIFACT_GENERATOR", "reloaded")
        get_settings.cache_clear()

        assert get_settings() is not first
        assert get_settings().artifacts.generator == "reloaded"
