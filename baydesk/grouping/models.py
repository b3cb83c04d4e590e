"""Структуры данных движка группировки контейнеров."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RUNNING_STATE = "running"


@dataclass(frozen=True, slots=True)
class ContainerRecord:
    """Одна запись контейнера из снимка Docker.

    Ядро группировки читает только ``id``, ``name`` и ``state``; остальные поля
    передаются в интерфейс без изменений.
    """

    id: str
    name: str = ""
    state: str = ""
    image: str = ""
    status: str = ""
    ports: str = ""

    @property
    def label(self) -> str:
        """Имя без пробелов по краям либо идентификатор, если имя пустое."""

        trimmed = self.name.strip()
        if trimmed:
            return trimmed
        return self.id.strip()

    @property
    def is_running(self) -> bool:
        return self.state == RUNNING_STATE


@dataclass(frozen=True, slots=True)
class ContainerGroup:
    """Группа записей с общим ключом и агрегированными счётчиками.

    Создаётся через ``builder.make_group``, который гарантирует непустой
    состав и согласованные счётчики.
    """

    key: str
    members: Tuple[ContainerRecord, ...]
    running_count: int
    stopped_count: int

    @property
    def size(self) -> int:
        return len(self.members)

    @property
    def has_running(self) -> bool:
        return self.running_count > 0

    @property
    def is_collapsible(self) -> bool:
        """Одиночная группа отображается обычной строкой, а не заголовком."""

        return self.size > 1
