"""Structured logging infrastructure.

Centralized logging configuration for l10n-cache using structlog.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module
    - bind_load_context(): Context manager for load-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_load_context(): Clear all load context

Example:
    from l10n_cache.infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_load_context,
    )

    configure_logging()

    logger = get_module_logger()
    with bind_load_context(domain="default"):
        logger.info("loading_domain")
"""

from l10n_cache.infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from l10n_cache.infrastructure.logging.context import (
    bind_load_context,
    clear_load_context,
    get_correlation_id,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_load_context",
    "clear_load_context",
    "get_correlation_id",
]
