"""Простой переводчик строк интерфейса."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

LOGGER = logging.getLogger(__name__)

AVAILABLE_LANGUAGES = ("en", "ru")
STRINGS_DIR = Path(__file__).parent / "strings"

_current_locale = "en"
_translations: Dict[str, str] = {}


def set_language(language: str) -> None:
    """Загружает JSON с переводами; неизвестный язык заменяется на en."""

    global _current_locale, _translations
    if language not in AVAILABLE_LANGUAGES:
        LOGGER.warning("Unsupported language %r, falling back to en", language)
        language = "en"
    file_path = STRINGS_DIR / f"{language}.json"
    _translations = json.loads(file_path.read_text(encoding="utf-8"))
    _current_locale = language


def current_language() -> str:
    return _current_locale


def translate(key: str) -> str:
    """Возвращает перевод ключа или сам ключ, если перевода нет."""

    return _translations.get(key, key)


set_language("en")
