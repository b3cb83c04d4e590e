"""Реестр настроек baydesk и их хранение в config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from baydesk.settings.exceptions import SettingsIOError, SettingsNotFoundError, SettingsValidationError
from baydesk.settings.groups import SettingsSection
from baydesk.settings.observers import SettingsObserver
from baydesk.settings.schemas import CONFIG_VERSION, SCHEMA

LOGGER = logging.getLogger(__name__)


def _fresh_sections() -> Dict[str, SettingsSection]:
    return {name: SettingsSection(name, fields) for name, fields in SCHEMA.items()}


class SettingsRegistry:
    """Разделы настроек из ``SCHEMA``, наблюдатели и файл config.json.

    Неизвестные разделы файла не интерпретируются, но сохраняются обратно
    без изменений.
    """

    def __init__(self, config_path: Path) -> None:
        self._path = config_path
        self._sections = _fresh_sections()
        self._extra: Dict[str, Any] = {}
        self._observers: List[SettingsObserver] = []

    def section(self, name: str) -> SettingsSection:
        try:
            return self._sections[name]
        except KeyError:
            raise SettingsNotFoundError(name) from None

    def get_value(self, section: str, key: str) -> Any:
        return self.section(section).get(key)

    def set_value(self, section: str, key: str, value: Any) -> None:
        old_value = self.section(section).set(key, value)
        for observer in list(self._observers):
            try:
                observer.on_setting_changed(section, key, old_value, value)
            except Exception:
                LOGGER.exception("Settings observer %r failed on %s.%s", observer, section, key)

    def register_observer(self, observer: SettingsObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: SettingsObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    # ---------------------------------------------------------------- storage
    def load(self) -> None:
        """Читает config.json; при отсутствии файла записывает значения по умолчанию.

        Файл применяется целиком: при любой ошибке текущие значения не меняются.
        """

        if not self._path.exists():
            LOGGER.info("Config file %s not found, writing defaults", self._path)
            self.save()
            return
        try:
            content = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SettingsIOError(self._path, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(self._path, "top-level JSON value must be an object")

        sections = _fresh_sections()
        extra: Dict[str, Any] = {}
        for name, data in content.items():
            if name == "version":
                continue
            if name not in sections:
                extra[name] = data
                continue
            if not isinstance(data, dict):
                raise SettingsValidationError(name, data, "section must be an object")
            sections[name].update(data)

        self._sections = sections
        self._extra = extra
        LOGGER.info("Settings loaded from %s", self._path)

    def save(self) -> None:
        payload: Dict[str, Any] = {"version": CONFIG_VERSION, **self._extra}
        for name, section in self._sections.items():
            payload[name] = section.to_dict()
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as exc:
            raise SettingsIOError(self._path, str(exc)) from exc
