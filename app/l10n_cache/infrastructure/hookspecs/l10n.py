"""Hook specifications for text domain loading and string translation."""

from typing import Optional

import pluggy

hookspec = pluggy.HookspecMarker("l10n_cache")


@hookspec(firstresult=True)
def l10n_catalog_path(domain: str, catalog_path: str) -> Optional[str]:
    """Remap the compiled catalog path before a domain is loaded.

    Args:
        domain: Text domain being loaded.
        catalog_path: Path the host would load the catalog from.

    Returns:
        Replacement path, or None to keep the host's path.
    """


@hookspec
def l10n_textdomain_loading(domain: str, catalog_path: str) -> None:
    """Notify plugins that a text domain is about to be loaded.

    Fired after the catalog path has been remapped. Every implementation
    is called; return values are ignored.

    Args:
        domain: Text domain being loaded.
        catalog_path: Path the catalog will be loaded from.
    """


@hookspec(firstresult=True)
def l10n_load_textdomain(domain: str, catalog_path: str, locale: str) -> Optional[bool]:
    """Load translations for a text domain.

    Args:
        domain: Text domain being loaded.
        catalog_path: Path of the compiled catalog.
        locale: Locale of the catalog.

    Returns:
        True when the hook took over loading, False when the host should
        fall back to reading the catalog itself.
    """


@hookspec(firstresult=True)
def l10n_gettext(translation: str, text: str, domain: str) -> Optional[str]:
    """Translate a plain string.

    Args:
        translation: Host's default translation.
        text: Source text.
        domain: Text domain.
    """


@hookspec(firstresult=True)
def l10n_gettext_with_context(
    translation: str, text: str, context: str, domain: str
) -> Optional[str]:
    """Translate a string disambiguated by context.

    Args:
        translation: Host's default translation.
        text: Source text.
        context: Message context.
        domain: Text domain.
    """


@hookspec(firstresult=True)
def l10n_ngettext(
    translation: str, single: str, plural: str, count: int, domain: str
) -> Optional[str]:
    """Translate a string with singular and plural forms.

    Args:
        translation: Host's default translation.
        single: Singular source text.
        plural: Plural source text.
        count: Number deciding between the forms.
        domain: Text domain.
    """
