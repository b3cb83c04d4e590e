"""Наблюдатели за изменением настроек."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class SettingsObserver(Protocol):
    """Контракт наблюдателя."""

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        """Обрабатывает изменение одного ключа."""


class LoggingSettingsObserver:
    """Пишет каждое изменение настроек в журнал."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        if old_value == new_value:
            return
        self._logger.info("Setting %s.%s changed: %r -> %r", group, key, old_value, new_value)


class CallbackSettingsObserver:
    """Вызывает callback при изменении ключей одной группы."""

    def __init__(self, group: str, callback: Callable[[str, object], None]) -> None:
        self._group = group
        self._callback = callback

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        if group == self._group and old_value != new_value:
            self._callback(key, new_value)
