"""Тесты SettingsRegistry."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Tuple

import pytest

from baydesk.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from baydesk.settings.registry import SettingsRegistry
from baydesk.settings.schemas import CONFIG_VERSION


class DummyObserver:
    def __init__(self) -> None:
        self.events: List[Tuple[str, str, object, object]] = []

    def on_setting_changed(
        self, group: str, key: str, old_value: object, new_value: object
    ) -> None:
        self.events.append((group, key, old_value, new_value))


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def registry(config_path: Path) -> SettingsRegistry:
    return SettingsRegistry(config_path)


def test_get_and_set_value(registry: SettingsRegistry) -> None:
    registry.set_value("docker", "socket", "/var/run/docker.sock")
    assert registry.get_value("docker", "socket") == "/var/run/docker.sock"
    assert registry.section("docker").get("socket") == "/var/run/docker.sock"


def test_set_value_invalid_raises(registry: SettingsRegistry) -> None:
    with pytest.raises(SettingsValidationError):
        registry.set_value("refresh", "refresh_rate_ms", 10)


def test_unknown_section_or_key_raises(registry: SettingsRegistry) -> None:
    with pytest.raises(SettingsNotFoundError):
        registry.get_value("unknown", "key")
    with pytest.raises(SettingsNotFoundError):
        registry.get_value("app", "unknown")
    with pytest.raises(SettingsNotFoundError):
        registry.section("unknown")


def test_save_and_load_persists_data(config_path: Path, registry: SettingsRegistry) -> None:
    registry.set_value("refresh", "refresh_rate_ms", 5000)
    registry.set_value("ui_state", "column_widths", [200, 120])
    registry.save()

    loaded = SettingsRegistry(config_path)
    loaded.load()
    assert loaded.get_value("refresh", "refresh_rate_ms") == 5000
    assert loaded.get_value("ui_state", "column_widths") == [200, 120]


def test_load_creates_defaults_if_missing(config_path: Path, registry: SettingsRegistry) -> None:
    registry.load()
    payload = json.loads(config_path.read_text(encoding="utf-8"))
    assert payload["version"] == CONFIG_VERSION
    assert payload["docker"]["socket"] == ""
    assert payload["refresh"]["refresh_rate_ms"] == 3000


def test_load_merges_partial_file_and_keeps_unknown_sections(
    config_path: Path, registry: SettingsRegistry
) -> None:
    config_path.write_text(
        json.dumps({"logging": {"level": "DEBUG"}, "extra": {"kept": True}}), encoding="utf-8"
    )
    registry.load()
    assert registry.get_value("logging", "level") == "DEBUG"
    assert registry.get_value("logging", "max_archived_files") == 5

    registry.save()
    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved["extra"] == {"kept": True}
    assert saved["version"] == CONFIG_VERSION


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_load_unreadable_file_raises(
    config_path: Path, registry: SettingsRegistry, content: str
) -> None:
    config_path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsIOError):
        registry.load()


def test_load_invalid_value_keeps_current_settings(
    config_path: Path, registry: SettingsRegistry
) -> None:
    registry.set_value("refresh", "refresh_rate_ms", 4000)
    config_path.write_text(
        json.dumps({"refresh": {"refresh_rate_ms": 2000}, "app": {"language": "de"}}),
        encoding="utf-8",
    )
    with pytest.raises(SettingsValidationError):
        registry.load()
    assert registry.get_value("refresh", "refresh_rate_ms") == 4000


def test_load_rejects_non_object_section(config_path: Path, registry: SettingsRegistry) -> None:
    config_path.write_text(json.dumps({"docker": "unix:///run/docker.sock"}), encoding="utf-8")
    with pytest.raises(SettingsValidationError):
        registry.load()


def test_observer_notification(registry: SettingsRegistry) -> None:
    observer = DummyObserver()
    registry.register_observer(observer)
    registry.register_observer(observer)
    registry.set_value("app", "language", "ru")
    assert observer.events == [("app", "language", "en", "ru")]
