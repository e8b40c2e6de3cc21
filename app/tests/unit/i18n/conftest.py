"""Feature-level fixtures for artifact cache tests."""

import pytest

from l10n_cache.i18n import (
    ArtifactCodec,
    ArtifactStore,
    DomainRegistry,
    MoCatalogReader,
    TranslationCache,
)
from tests.factories.i18n import (
    CATALOG_MTIME,
    CATALOG_PATH,
    FakeFileSystem,
    make_mo_bytes,
)


@pytest.fixture
def sample_messages():
    """Messages covering plain, contextual and plural entries."""
    return {
        "Hello": "Bonjour",
        ("menu", "File"): "Fichier",
        "item\x00items": ["1 élément", "%d éléments"],
    }


@pytest.fixture
def expected_table():
    """Table the sample catalog resolves to."""
    return {
        "Hello": ["Bonjour"],
        "item": ["1 élément", "%d éléments"],
        "menuFile": ["Fichier"],
    }


@pytest.fixture
def fake_fs():
    """Empty in-memory filesystem."""
    return FakeFileSystem()


@pytest.fixture
def fake_catalog(fake_fs, sample_messages):
    """Sample catalog placed in the fake filesystem."""
    fake_fs.put(CATALOG_PATH, make_mo_bytes(sample_messages), mtime=CATALOG_MTIME)
    return CATALOG_PATH


@pytest.fixture
def fake_cache(fake_fs):
    """TranslationCache over the fake filesystem."""
    return TranslationCache(
        store=ArtifactStore(fake_fs),
        reader=MoCatalogReader(),
        codec=ArtifactCodec(),
    )


@pytest.fixture
def registry():
    """Empty DomainRegistry."""
    return DomainRegistry()
