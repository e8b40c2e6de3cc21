"""Translation plugin manager."""

from functools import lru_cache
from typing import Iterable

import pluggy
import structlog

from l10n_cache.infrastructure import hookspecs

PROJECT_NAME = "l10n_cache"

logger = structlog.get_logger()


def create_plugin_manager(plugins: Iterable[object] = ()) -> pluggy.PluginManager:
    """Create a plugin manager with the translation hook specs.

    Args:
        plugins: Plugin objects to register, in registration order.

    Returns:
        PluginManager configured for translation hooks.
    """
    pm = pluggy.PluginManager(PROJECT_NAME)
    pm.add_hookspecs(hookspecs.l10n)

    for plugin in plugins:
        pm.register(plugin)
        logger.debug("plugin_registered", plugin=type(plugin).__name__)

    return pm


@lru_cache(maxsize=1)
def get_plugin_manager() -> pluggy.PluginManager:
    """Get the process-wide translation plugin manager singleton.

    Also loads plugins advertised under the ``l10n_cache`` entry point group.

    Returns:
        PluginManager configured for translation hooks.
    """
    pm = create_plugin_manager()
    loaded = pm.load_setuptools_entrypoints(PROJECT_NAME)

    logger.info("plugin_manager_created", entrypoint_plugins=loaded)
    return pm
