"""Tests for l10n_cache.i18n.models module."""

import dataclasses

import pytest

from l10n_cache.i18n import (
    DEFAULT_PLURAL_RULE,
    Artifact,
    CatalogMetadata,
    ParsedCatalog,
    ValidationResult,
    ValidationState,
)
from l10n_cache.i18n.models import contextual_key


class TestContextualKey:
    def test_concatenates_without_separator(self):
        assert contextual_key("menu", "File") == "menuFile"

    def test_empty_context(self):
        assert contextual_key("", "File") == "File"


class TestCatalogMetadata:
    def test_defaults(self):
        metadata = CatalogMetadata(revision_time=1)

        assert metadata.generator == "system"
        assert metadata.domain == "messages"
        assert metadata.locale == ""
        assert metadata.plural_rule == DEFAULT_PLURAL_RULE

    def test_is_immutable(self):
        metadata = CatalogMetadata(revision_time=1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            metadata.revision_time = 2


class TestParsedCatalog:
    def test_plural_rule_from_headers(self):
        catalog = ParsedCatalog(headers={"plural-forms": "nplurals=1; plural=0;"})

        assert catalog.plural_rule == "nplurals=1; plural=0;"

    def test_plural_rule_defaults(self):
        assert ParsedCatalog().plural_rule == DEFAULT_PLURAL_RULE
        assert ParsedCatalog(headers={"plural-forms": ""}).plural_rule == DEFAULT_PLURAL_RULE


class TestValidationResult:
    def test_fresh_carries_artifact(self):
        artifact = Artifact(metadata=CatalogMetadata(revision_time=1))
        result = ValidationResult.fresh(artifact)

        assert result.is_fresh
        assert result.state == ValidationState.FRESH
        assert result.artifact is artifact

    @pytest.mark.parametrize(
        "result, state",
        [
            (ValidationResult.stale(), ValidationState.STALE),
            (ValidationResult.missing(), ValidationState.MISSING),
        ],
    )
    def test_not_fresh_has_no_artifact(self, result, state):
        assert result.state == state
        assert not result.is_fresh
        assert result.artifact is None
