"""Создание и запуск GUI приложения baydesk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PySide6 import QtWidgets

from baydesk.docker_api.data_provider import DockerDataProvider
from baydesk.i18n.translator import set_language
from baydesk.settings.registry import SettingsRegistry
from baydesk.ui.main_window import create_main_window


class RunnableApp(Protocol):
    """Приложение, которое можно запустить и получить код возврата."""

    def run(self) -> int:  # pragma: no cover - протокол
        ...


@dataclass
class GUIApp:
    """Приложение PySide6 с главным окном групп контейнеров."""

    settings: SettingsRegistry
    docker_data_provider: DockerDataProvider

    def __post_init__(self) -> None:
        self._qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        self._qt_app.setApplicationName("baydesk")
        set_language(self.settings.get_value("app", "language"))
        self._window = create_main_window(
            settings=self.settings,
            docker_data_provider=self.docker_data_provider,
        )

    def run(self) -> int:
        self._window.show()
        return self._qt_app.exec()


def create_application(
    settings: SettingsRegistry,
    docker_data_provider: DockerDataProvider,
) -> RunnableApp:
    """Фабрика GUI приложения."""

    return GUIApp(settings=settings, docker_data_provider=docker_data_provider)
