"""Чтение загрузки хоста при помощи psutil для футера."""

from __future__ import annotations

from dataclasses import dataclass

import psutil

_UNITS = ("B", "KB", "MB", "GB", "TB")


@dataclass(slots=True)
class SystemMetrics:
    ram: str
    cpu: str


def read_system_metrics() -> SystemMetrics:
    """Возвращает использование RAM и CPU хоста в виде готовых строк."""

    memory = psutil.virtual_memory()
    cpu_percent = psutil.cpu_percent(interval=None)
    return SystemMetrics(
        ram=f"{memory.percent:.1f}% ({format_bytes(memory.used)}/{format_bytes(memory.total)})",
        cpu=f"{cpu_percent:.1f}%",
    )


def format_bytes(value: float) -> str:
    size = float(value)
    index = 0
    while size >= 1024 and index < len(_UNITS) - 1:
        size /= 1024.0
        index += 1
    return f"{size:.1f} {_UNITS[index]}"
