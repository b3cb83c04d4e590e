"""Генерация строк-кандидатов на роль ключа группы по имени контейнера."""

from __future__ import annotations

import re
from typing import Dict, Final, Tuple

from baydesk.grouping.models import ContainerRecord

SEPARATORS: Final[frozenset[str]] = frozenset({"-", "_"})
_INSTANCE_SUFFIX = re.compile(r"[-_][0-9]+\Z")


def strip_instance_suffix(name: str) -> str:
    """Убирает один завершающий суффикс вида ``-<цифры>`` или ``_<цифры>``."""

    return _INSTANCE_SUFFIX.sub("", name, count=1)


def generate_candidates(name: str) -> Tuple[str, ...]:
    """Возвращает кандидатов в фиксированном порядке без повторов.

    Порядок: полное имя, имя без суффикса экземпляра, затем префиксы перед
    каждым разделителем слева направо. Этот порядок используется как последний
    критерий при выборе ключа.
    """

    trimmed = name.strip()
    if not trimmed:
        return ()

    # dict сохраняет порядок вставки и отбрасывает повторы
    out: Dict[str, None] = {trimmed: None}

    base = strip_instance_suffix(trimmed)
    if base:
        out.setdefault(base, None)

    for index, char in enumerate(trimmed):
        if char in SEPARATORS:
            prefix = trimmed[:index]
            if prefix:
                out.setdefault(prefix, None)

    return tuple(out)


def candidates_for(record: ContainerRecord) -> Tuple[str, ...]:
    """Кандидаты для записи: по имени или, если оно пустое, по идентификатору."""

    return generate_candidates(record.label)
