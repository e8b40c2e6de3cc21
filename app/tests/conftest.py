import pytest

from l10n_cache.infrastructure.configuration import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Drop the cached settings so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
