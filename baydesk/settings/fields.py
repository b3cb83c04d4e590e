"""Описание полей настроек: значение по умолчанию и проверки.

Проверка (``Check``) получает значение и возвращает текст ошибки либо None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

Check = Callable[[Any], Optional[str]]


def of_type(expected: type) -> Check:
    def check(value: Any) -> Optional[str]:
        # bool наследует int, но числом в настройках не считается
        if isinstance(value, bool) and expected is not bool:
            return f"expected {expected.__name__}, got bool"
        if not isinstance(value, expected):
            return f"expected {expected.__name__}, got {type(value).__name__}"
        return None

    return check


def in_range(low: int, high: int) -> Check:
    """Целое число в границах [low, high]."""

    type_check = of_type(int)

    def check(value: Any) -> Optional[str]:
        error = type_check(value)
        if error:
            return error
        if not low <= value <= high:
            return f"{value} is outside [{low}, {high}]"
        return None

    return check


def one_of(*allowed: Any) -> Check:
    def check(value: Any) -> Optional[str]:
        if value not in allowed:
            return f"{value!r} is not one of {list(allowed)}"
        return None

    return check


def matches(pattern: str) -> Check:
    """Строка, целиком совпадающая с шаблоном."""

    compiled = re.compile(pattern)

    def check(value: Any) -> Optional[str]:
        if not isinstance(value, str):
            return f"expected str, got {type(value).__name__}"
        if not compiled.fullmatch(value):
            return f"{value!r} does not match {pattern!r}"
        return None

    return check


def list_of(item_type: type) -> Check:
    item_check = of_type(item_type)

    def check(value: Any) -> Optional[str]:
        if not isinstance(value, list):
            return f"expected list, got {type(value).__name__}"
        for item in value:
            error = item_check(item)
            if error:
                return f"list item: {error}"
        return None

    return check


@dataclass(frozen=True)
class Field:
    default: Any
    checks: Tuple[Check, ...] = ()

    def check(self, value: Any) -> Optional[str]:
        """Возвращает первую ошибку проверки или None."""

        for check in self.checks:
            error = check(value)
            if error:
                return error
        return None
