"""Тесты чтения системных метрик."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from baydesk.utils import system_metrics
from baydesk.utils.system_metrics import format_bytes, read_system_metrics


def test_format_bytes() -> None:
    assert format_bytes(512) == "512.0 B"
    assert format_bytes(1536) == "1.5 KB"
    assert format_bytes(3 * 1024**3) == "3.0 GB"


def test_read_system_metrics(monkeypatch: pytest.MonkeyPatch) -> None:
    memory = SimpleNamespace(percent=42.0, used=2 * 1024**3, total=8 * 1024**3)
    monkeypatch.setattr(system_metrics.psutil, "virtual_memory", lambda: memory)
    monkeypatch.setattr(system_metrics.psutil, "cpu_percent", lambda interval=None: 12.34)

    metrics = read_system_metrics()
    assert metrics.ram == "42.0% (2.0 GB/8.0 GB)"
    assert metrics.cpu == "12.3%"
