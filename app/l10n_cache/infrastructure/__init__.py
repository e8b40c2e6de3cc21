"""Infrastructure modules for l10n-cache.

Centralized infrastructure components:
- configuration: Settings management (Settings, ArtifactSettings, get_settings)
- logging: Structured logging (configure_logging, get_module_logger)
- hookspecs: pluggy hook specifications for domain loading and lookups
- plugins: Plugin manager and hookimpl marker
"""
