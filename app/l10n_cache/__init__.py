"""l10n-cache: JSON artifact cache for compiled gettext catalogs."""

__version__ = "0.1.0"
