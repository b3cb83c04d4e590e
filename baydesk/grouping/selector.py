"""Выбор единственного ключа группы для каждой записи."""

from __future__ import annotations

from typing import Final, Mapping, Sequence, Tuple

MIN_SHARED_COUNT: Final[int] = 2


def _rank(candidate: str, count: int) -> Tuple[int, int]:
    return count, len(candidate)


def select_key(label: str, candidates: Sequence[str], index: Mapping[str, int]) -> str:
    """Возвращает лучший ключ из кандидатов записи.

    Подходят только кандидаты, общие хотя бы для двух записей. Побеждает
    наибольшая частота, затем наибольшая длина; при полном равенстве остаётся
    тот, что раньше в порядке генерации. Если подходящих нет, ключом
    становится собственное имя записи.
    """

    best_key = label
    best_rank: Tuple[int, int] | None = None
    for candidate in candidates:
        count = index.get(candidate, 0)
        if count < MIN_SHARED_COUNT:
            continue
        rank = _rank(candidate, count)
        # строгое сравнение: при равенстве выигрывает более ранний кандидат
        if best_rank is None or rank > best_rank:
            best_key = candidate
            best_rank = rank
    return best_key
