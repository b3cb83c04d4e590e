"""Точка входа в приложение baydesk."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from baydesk import __version__
from baydesk.docker_api.data_provider import DockerDataProvider
from baydesk.settings.exceptions import SettingsError
from baydesk.settings.groups import SettingsSection
from baydesk.settings.observers import LoggingSettingsObserver
from baydesk.settings.registry import SettingsRegistry
from baydesk.utils.logger import configure_logging
from baydesk.utils.paths import CONFIG_DIR

LOGGER = logging.getLogger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Создаёт реестр настроек и загружает config.json.

    Повреждённый или невалидный файл не мешает запуску: используются
    значения по умолчанию, а ошибка остаётся в логе.
    """

    registry = SettingsRegistry(config_path=config_path)
    try:
        registry.load()
    except SettingsError as exc:
        LOGGER.warning("Using default settings, config could not be loaded: %s", exc)
    registry.register_observer(LoggingSettingsObserver())
    return registry


def setup_logging_from_settings(base_dir: Path, logging_settings: SettingsSection) -> None:
    """Настраивает логирование в соответствии с группой настроек logging."""

    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочую структуру (~/.baydesk, logs)."""

    try:
        (base_dir / "logs").mkdir(parents=True, exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Cannot initialize workdir %s: %s", base_dir, exc)
        return False


def main() -> int:
    """Готовит окружение и запускает приложение."""

    base_dir = CONFIG_DIR
    if not initialize_workdir(base_dir):
        return 1
    configure_logging(base_dir / "logs")

    settings = initialize_settings(base_dir / "config.json")
    setup_logging_from_settings(base_dir, settings.section("logging"))

    # Qt загружается только при запуске GUI
    from baydesk.app import create_application

    docker_data_provider = DockerDataProvider(settings)
    LOGGER.info("Starting baydesk %s", __version__)
    app = create_application(settings=settings, docker_data_provider=docker_data_provider)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
