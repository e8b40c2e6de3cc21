"""Compiled catalog reading.

Defines the contract for turning compiled catalog bytes into a
ParsedCatalog and provides the GNU gettext ``.mo`` implementation.
"""

import gettext
import io
import struct
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Union

from l10n_cache.i18n.errors import CatalogUnreadable
from l10n_cache.i18n.models import METADATA_KEY, ParsedCatalog, contextual_key
from l10n_cache.infrastructure.logging import get_module_logger

logger = get_module_logger()

# Separates msgctxt from msgid in compiled catalogs.
CONTEXT_GLUE = "\x04"


class CatalogReader(ABC):
    """Abstract base for compiled catalog readers."""

    @abstractmethod
    def parse(self, data: bytes, source: Union[str, Path] = "") -> ParsedCatalog:
        """Parse compiled catalog bytes.

        Args:
            data: Raw catalog bytes.
            source: Catalog path, used in errors and logs.

        Returns:
            ParsedCatalog with headers and entries.

        Raises:
            CatalogUnreadable: If the bytes are not a valid catalog.
        """


class MoCatalogReader(CatalogReader):
    """Reader for GNU gettext ``.mo`` catalogs.

    Parsing is delegated to ``gettext.GNUTranslations``. Its flat catalog is
    regrouped so that every message key maps to its list of translated forms:

    - ``"msgid"`` becomes ``{"msgid": [msgstr]}``
    - ``("msgid", n)`` plural forms become ``{"msgid": [form0, form1, ...]}``
    - ``"ctx\\x04msgid"`` becomes ``{"ctxmsgid": [...]}``
    """

    def parse(self, data: bytes, source: Union[str, Path] = "") -> ParsedCatalog:
        fp = io.BytesIO(data)
        fp.name = str(source)
        try:
            translations = gettext.GNUTranslations(fp)
        except (OSError, struct.error, ValueError, LookupError, IndexError) as e:
            # LookupError: unknown charset. IndexError: Plural-Forms without plural=
            logger.warning("catalog_parse_error", catalog_path=str(source), error=str(e))
            raise CatalogUnreadable(source, str(e)) from e

        # pylint: disable=protected-access
        entries = self._group_forms(translations._catalog)
        headers = dict(translations.info())

        logger.debug(
            "catalog_parsed",
            catalog_path=str(source),
            entry_count=len(entries),
            charset=translations.charset(),
        )
        return ParsedCatalog(headers=headers, entries=entries)

    def _group_forms(self, catalog: Dict) -> Dict[str, List[str]]:
        plural_forms: Dict[str, Dict[int, str]] = {}
        entries: Dict[str, List[str]] = {}

        for raw_key, message in catalog.items():
            if isinstance(raw_key, tuple):
                msgid, index = raw_key
                key = self._table_key(msgid)
                plural_forms.setdefault(key, {})[index] = message
            else:
                key = self._table_key(raw_key)
                entries[key] = [message]

        for key, forms in plural_forms.items():
            entries[key] = [forms[i] for i in sorted(forms)]

        entries.pop(METADATA_KEY, None)
        return entries

    @staticmethod
    def _table_key(msgid: str) -> str:
        context, glue, text = msgid.partition(CONTEXT_GLUE)
        if not glue:
            return msgid
        return contextual_key(context, text)

