"""Исключения подсистемы настроек."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class SettingsError(Exception):
    """Базовая ошибка настроек."""


class SettingsNotFoundError(SettingsError):
    def __init__(self, section: str, key: Optional[str] = None) -> None:
        self.section = section
        self.key = key
        name = f"{section}.{key}" if key else section
        super().__init__(f"Unknown setting '{name}'")


class SettingsValidationError(SettingsError):
    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for '{name}': {reason}")


class SettingsIOError(SettingsError):
    """Не удалось прочитать или записать config.json."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot use settings file '{path}': {reason}")
