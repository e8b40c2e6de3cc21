"""Fixtures for l10n_cache.infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import Mock

from l10n_cache.infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def clean_load_context():
    """Start and finish every test with an empty logging context."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
