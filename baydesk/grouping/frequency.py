"""Частотный индекс кандидатов по текущему снимку."""

from __future__ import annotations

from collections import Counter
from typing import Iterable


def build_frequency_index(candidate_sets: Iterable[Iterable[str]]) -> Counter[str]:
    """Считает, скольким разным записям подходит каждый кандидат.

    Каждая запись добавляет не больше единицы на каждого своего кандидата,
    даже если во входной последовательности он повторяется.
    """

    index: Counter[str] = Counter()
    for candidates in candidate_sets:
        index.update(set(candidates))
    return index
