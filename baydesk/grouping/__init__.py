"""Группировка контейнеров по общим фрагментам имён."""

from __future__ import annotations

import logging
from typing import Iterable, List

from baydesk.grouping.builder import build_groups
from baydesk.grouping.candidates import candidates_for, generate_candidates
from baydesk.grouping.frequency import build_frequency_index
from baydesk.grouping.models import ContainerGroup, ContainerRecord
from baydesk.grouping.selector import select_key

LOGGER = logging.getLogger(__name__)

__all__ = [
    "ContainerGroup",
    "ContainerRecord",
    "build_frequency_index",
    "build_groups",
    "generate_candidates",
    "group_containers",
    "select_key",
]


def group_containers(records: Iterable[ContainerRecord]) -> List[ContainerGroup]:
    """Разбивает снимок контейнеров на упорядоченные группы.

    Чистая функция в два прохода: сначала кандидаты всех записей и общий
    частотный индекс, затем выбор ключа для каждой записи. Состояние между
    вызовами не сохраняется.
    """

    snapshot = list(records)
    candidate_sets = [candidates_for(record) for record in snapshot]
    index = build_frequency_index(candidate_sets)
    keys = [
        select_key(record.label, candidates, index)
        for record, candidates in zip(snapshot, candidate_sets)
    ]
    groups = build_groups(snapshot, keys)
    LOGGER.debug("Grouped %d containers into %d groups", len(snapshot), len(groups))
    return groups
