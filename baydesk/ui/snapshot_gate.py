"""Отбрасывание устаревших снимков при перекрывающихся обновлениях."""

from __future__ import annotations

import logging

LOGGER = logging.getLogger(__name__)


class SnapshotGate:
    """Нумерует запросы снимков и пропускает только результаты новее показанного.

    Ошибка тоже считается результатом: поздняя ошибка старого запроса не
    затирает уже показанный более новый снимок.
    """

    def __init__(self) -> None:
        self._requested = 0
        self._applied = 0

    @property
    def has_applied(self) -> bool:
        return self._applied > 0

    def next(self) -> int:
        """Выдаёт номер для нового запроса."""

        self._requested += 1
        return self._requested

    def accept(self, generation: int) -> bool:
        """Отмечает результат как показанный, если он новее текущего."""

        if generation > self._requested:
            raise ValueError(f"Generation {generation} was never requested")
        if generation <= self._applied:
            LOGGER.debug("Discarding stale snapshot %s (applied %s)", generation, self._applied)
            return False
        self._applied = generation
        return True
