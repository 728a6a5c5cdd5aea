from __future__ import annotations

import logging
from typing import Dict, Optional

from maniuz import i18n_seed
from maniuz.config import settings
from maniuz.constants import DEFAULT_LANGUAGE, LANGUAGES
from maniuz.db import sqlite as db

logger = logging.getLogger(__name__)


def normalize_language(lang: Optional[str]) -> str:
    if lang in LANGUAGES:
        return lang
    if settings.default_language in LANGUAGES:
        return settings.default_language
    return DEFAULT_LANGUAGE


class Translator:
    """Dictionary of one language, read from the store once per request."""

    def __init__(self, lang: Optional[str] = None, strings: Optional[Dict[str, str]] = None):
        self.lang = normalize_language(lang)
        if strings is None:
            strings = db.get_translations(self.lang)
            if not strings:
                logger.warning("No translations found for language: %s", self.lang)
        self.strings = strings

    def t(self, key: str) -> str:
        return self.strings.get(key) or key

    __call__ = t


def seed_translations(overwrite: bool = False) -> Dict[str, int]:
    written = {}
    for lang in LANGUAGES:
        written[lang] = db.bulk_set_translations(lang, i18n_seed.by_language(lang), overwrite=overwrite)
    logger.info("translations seeded: %s", written)
    return written


def filter_rows(rows: list[dict], query: str) -> list[dict]:
    q = (query or "").strip().lower()
    if not q:
        return rows
    return [r for r in rows if any(q in (r.get(col) or "").lower() for col in ("key", *LANGUAGES))]
