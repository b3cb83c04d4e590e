"""Проверки наблюдателей за настройками."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from baydesk.settings.observers import (
    CallbackSettingsObserver,
    LoggingSettingsObserver,
    SettingsObserver,
)
from baydesk.settings.registry import SettingsRegistry


class FailingObserver:
    def __init__(self) -> None:
        self.counter = 0

    def on_setting_changed(
        self, group: str, key: str, old_value: object, new_value: object
    ) -> None:
        self.counter += 1
        raise RuntimeError("observer failed")


@pytest.fixture
def registry(tmp_path: Path) -> SettingsRegistry:
    return SettingsRegistry(tmp_path / "config.json")


def test_observers_match_protocol() -> None:
    assert isinstance(LoggingSettingsObserver(), SettingsObserver)
    observer = CallbackSettingsObserver("refresh", lambda key, value: None)
    assert isinstance(observer, SettingsObserver)


def test_callback_observer_filters_by_group(registry: SettingsRegistry) -> None:
    calls: List[Tuple[str, object]] = []
    observer = CallbackSettingsObserver("refresh", lambda k, v: calls.append((k, v)))
    registry.register_observer(observer)

    registry.set_value("app", "language", "ru")
    registry.set_value("refresh", "refresh_rate_ms", 4000)
    registry.set_value("refresh", "refresh_rate_ms", 4000)

    assert calls == [("refresh_rate_ms", 4000)]


def test_unregister_observer(registry: SettingsRegistry) -> None:
    calls: List[Tuple[str, object]] = []
    observer = CallbackSettingsObserver("app", lambda k, v: calls.append((k, v)))
    registry.register_observer(observer)
    registry.unregister_observer(observer)
    registry.set_value("app", "language", "ru")
    assert calls == []


def test_failing_observer_does_not_block_others(registry: SettingsRegistry) -> None:
    failing = FailingObserver()
    calls: List[Tuple[str, object]] = []
    registry.register_observer(failing)
    registry.register_observer(CallbackSettingsObserver("app", lambda k, v: calls.append((k, v))))
    registry.set_value("app", "language", "ru")
    assert calls == [("language", "ru")]
    assert failing.counter == 1


def test_logging_observer_writes_changes(
    registry: SettingsRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("INFO")
    registry.register_observer(LoggingSettingsObserver())
    registry.set_value("app", "language", "ru")
    assert any("app.language changed" in record.message for record in caplog.records)
