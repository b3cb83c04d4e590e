"""Построение упорядоченного списка групп по выбранным ключам."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from baydesk.grouping.models import ContainerGroup, ContainerRecord


def _member_sort_key(record: ContainerRecord) -> Tuple[bool, str, str]:
    return not record.is_running, record.label, record.id


def _group_sort_key(group: ContainerGroup) -> Tuple[bool, int, str]:
    return not group.has_running, -group.size, group.key


def make_group(key: str, members: Sequence[ContainerRecord]) -> ContainerGroup:
    """Создаёт группу с отсортированными участниками и счётчиками состояний."""

    if not members:
        raise ValueError(f"Group '{key}' must have at least one member")
    ordered = tuple(sorted(members, key=_member_sort_key))
    running = sum(1 for record in ordered if record.is_running)
    return ContainerGroup(
        key=key,
        members=ordered,
        running_count=running,
        stopped_count=len(ordered) - running,
    )


def build_groups(
    records: Sequence[ContainerRecord], keys: Sequence[str]
) -> List[ContainerGroup]:
    """Разбивает записи по ключам и упорядочивает группы.

    Сначала идут группы хотя бы с одним запущенным контейнером, затем по
    убыванию размера и по ключу. Запись без имени и без идентификатора всегда
    образует отдельную группу.
    """

    if len(records) != len(keys):
        raise ValueError(f"Expected {len(records)} keys, got {len(keys)}")

    partitions: Dict[str, List[ContainerRecord]] = {}
    orphans: List[ContainerRecord] = []
    for record, key in zip(records, keys):
        if not record.label:
            orphans.append(record)
            continue
        partitions.setdefault(key, []).append(record)

    groups = [make_group(key, members) for key, members in partitions.items()]
    groups.extend(make_group("", [record]) for record in orphans)
    groups.sort(key=_group_sort_key)
    return groups
