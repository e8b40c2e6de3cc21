"""Load context binding for structured logging.

Binds catalog-load metadata to every log entry emitted while a text domain
is being loaded, so artifact events can be traced back to the load that
triggered them.

Usage:
    from l10n_cache.infrastructure.logging import bind_load_context

    with bind_load_context(domain="default", catalog_path="/l10n/fr_FR.mo"):
        logger.info("loading_domain")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_load_context(
    domain: Optional[str] = None,
    catalog_path: Optional[str] = None,
    locale: Optional[str] = None,
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind load-scoped context to all logs within the context manager.

    Args:
        domain: Text domain being loaded.
        catalog_path: Path of the compiled catalog.
        locale: Locale of the catalog.
        correlation_id: Unique load identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if domain is not None:
        context["domain"] = domain

    if catalog_path is not None:
        context["catalog_path"] = str(catalog_path)

    if locale is not None:
        context["locale"] = locale

    context.update(extra_context)

    # Tokens restore an enclosing load's values on exit
    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_load_context() -> None:
    """Clear all load-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
