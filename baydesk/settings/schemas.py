"""Схема config.json: разделы, их поля и значения по умолчанию."""

from __future__ import annotations

from typing import Dict

from baydesk.settings.fields import Field, in_range, list_of, matches, of_type, one_of

CONFIG_VERSION = "1.0.0"

# пустая строка: адрес берётся из DOCKER_HOST / окружения
SOCKET_PATTERN = r"(|/\S+|(unix|tcp|npipe|http|https|ssh)://\S+)"

SCHEMA: Dict[str, Dict[str, Field]] = {
    "app": {
        "language": Field("en", (one_of("en", "ru"),)),
        "window_width": Field(1280, (in_range(640, 10000),)),
        "window_height": Field(800, (in_range(480, 10000),)),
        "window_x": Field(0, (in_range(-10000, 10000),)),
        "window_y": Field(0, (in_range(-10000, 10000),)),
        "window_maximized": Field(False, (of_type(bool),)),
    },
    "logging": {
        "enabled": Field(True, (of_type(bool),)),
        "level": Field("INFO", (one_of("DEBUG", "INFO", "WARNING", "ERROR"),)),
        "max_file_size_mb": Field(10, (in_range(1, 1000),)),
        "max_archived_files": Field(5, (in_range(1, 50),)),
    },
    "docker": {
        "socket": Field("", (matches(SOCKET_PATTERN),)),
        "connection_timeout_sec": Field(5, (in_range(1, 120),)),
        "connection_timeout_enabled": Field(True, (of_type(bool),)),
    },
    "refresh": {
        "auto_refresh_enabled": Field(True, (of_type(bool),)),
        "refresh_rate_ms": Field(3000, (in_range(1000, 60000),)),
        "system_metrics_enabled": Field(True, (of_type(bool),)),
        "system_metrics_refresh_ms": Field(3000, (in_range(500, 60000),)),
    },
    "ui_state": {
        "only_running": Field(False, (of_type(bool),)),
        # ширины колонок дерева в порядке отображения
        "column_widths": Field([], (list_of(int),)),
    },
}
