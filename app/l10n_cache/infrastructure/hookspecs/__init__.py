"""pluggy hook specifications."""

from l10n_cache.infrastructure.hookspecs import l10n

__all__ = ["l10n"]
