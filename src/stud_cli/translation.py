# SPDX-FileCopyrightText: 2025 Sequent Tech Inc <legal@sequentech.io>
#
# SPDX-License-Identifier: MIT

"""Message catalogs for user-facing strings."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import tomli

from .template_utils import render_template, get_template_variables

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"
SUPPORTED_LOCALES = ("en", "fr")
TRANSLATIONS_PATH = Path(__file__).parent / "resources"


class TranslationService:
    """
    Looks up dotted message keys (e.g. ``migration.running``) in a TOML
    catalog and renders them with Jinja2 parameters.

    Messages missing from the requested locale fall back to English; keys
    missing from both are returned unchanged.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, translations_path: Optional[Path] = None):
        if locale not in SUPPORTED_LOCALES:
            logger.debug("Unsupported locale %r, using %r", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self.locale = locale
        self.translations_path = Path(translations_path) if translations_path else TRANSLATIONS_PATH
        self._catalogs: Dict[str, Dict[str, Any]] = {}

    def _catalog(self, locale: str) -> Dict[str, Any]:
        if locale not in self._catalogs:
            catalog_file = self.translations_path / f"messages.{locale}.toml"
            if catalog_file.exists():
                with open(catalog_file, 'rb') as f:
                    self._catalogs[locale] = tomli.load(f)
            else:
                self._catalogs[locale] = {}
        return self._catalogs[locale]

    @staticmethod
    def _lookup(catalog: Dict[str, Any], key: str) -> Optional[str]:
        node: Any = catalog
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node if isinstance(node, str) else None

    def trans(self, key: str, params: Optional[Dict[str, Any]] = None) -> str:
        message = self._lookup(self._catalog(self.locale), key)
        if message is None and self.locale != DEFAULT_LOCALE:
            message = self._lookup(self._catalog(DEFAULT_LOCALE), key)
        if message is None:
            return key

        if not get_template_variables(message):
            return message
        return render_template(message, params or {}, strict=False)
