"""Plugin managers and utilities."""

import pluggy

from l10n_cache.infrastructure.plugins.manager import (
    PROJECT_NAME,
    create_plugin_manager,
    get_plugin_manager,
)

# Singleton hookimpl marker for entire application
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)

__all__ = [
    "hookimpl",
    "create_plugin_manager",
    "get_plugin_manager",
]
