"""Раздел настроек: значения одного блока config.json."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Mapping

from baydesk.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from baydesk.settings.fields import Field

LOGGER = logging.getLogger(__name__)


class SettingsSection:
    """Значения раздела; каждое значение проверяется до записи."""

    def __init__(self, name: str, fields: Mapping[str, Field]) -> None:
        self.name = name
        self._fields = dict(fields)
        self._values: Dict[str, Any] = {}
        self.reset()

    def get(self, key: str) -> Any:
        self._field(key)
        return self._values[key]

    def set(self, key: str, value: Any) -> Any:
        """Записывает значение и возвращает прежнее."""

        self._ensure_valid(key, value)
        old_value = self._values[key]
        self._values[key] = value
        return old_value

    def update(self, data: Mapping[str, Any]) -> None:
        """Применяет значения из config.json целиком или не применяет ничего."""

        known = {}
        for key, value in data.items():
            if key not in self._fields:
                LOGGER.warning("Ignoring unknown setting %s.%s", self.name, key)
                continue
            self._ensure_valid(key, value)
            known[key] = value
        self._values.update(known)

    def reset(self) -> None:
        self._values = {key: copy.deepcopy(field.default) for key, field in self._fields.items()}

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._values)

    def _field(self, key: str) -> Field:
        try:
            return self._fields[key]
        except KeyError:
            raise SettingsNotFoundError(self.name, key) from None

    def _ensure_valid(self, key: str, value: Any) -> None:
        error = self._field(key).check(value)
        if error:
            raise SettingsValidationError(f"{self.name}.{key}", value, error)
