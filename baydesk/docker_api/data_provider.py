"""Менеджер доступа к данным Docker для интерфейса.

Файл описывает класс, который объединяет настройки подключения и функции из
`baydesk.docker_api` для получения снимков контейнеров (в том числе уже
сгруппированных) и для выполнения базовых действий (start/stop/remove).
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError
from typing import Any, List

from baydesk.docker_api import containers
from baydesk.docker_api.client import DockerClientWrapper
from baydesk.docker_api.exceptions import DockerAPIError
from baydesk.grouping import ContainerGroup, ContainerRecord, group_containers
from baydesk.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)


class DockerDataProvider:
    """Предоставляет высокоуровневый API для работы с Docker-данными."""

    def __init__(self, settings: Any) -> None:
        self._settings = settings

    # ------------------------------------------------------------------ helpers
    @property
    def base_url(self) -> str:
        """Адрес Docker engine из настроек; пустая строка означает окружение."""

        raw_value = str(self._settings.get_value("docker", "socket") or "")
        return normalize_socket_path(raw_value)

    def _create_client(self) -> DockerClientWrapper:
        """Создаёт Docker client, ограничивая время подключения.

        Зависшее подключение не удерживает вызывающий поток дольше таймаута:
        executor закрывается без ожидания, а поток подключения завершится сам.
        """

        base_url = self.base_url
        timeout_enabled = bool(self._settings.get_value("docker", "connection_timeout_enabled"))
        timeout = int(self._settings.get_value("docker", "connection_timeout_sec") or 0)
        if not timeout_enabled or timeout <= 0:
            return DockerClientWrapper(base_url)

        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="docker-connect")
        try:
            future = executor.submit(DockerClientWrapper, base_url)
            try:
                return future.result(timeout=timeout)
            except TimeoutError as exc:
                LOGGER.error(
                    "Docker client creation timeout for %s after %s seconds",
                    base_url or "env",
                    timeout,
                )
                raise DockerAPIError(f"Connection timeout after {timeout} seconds") from exc
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    # ------------------------------------------------------------------- fetches
    def fetch_containers(self) -> List[ContainerRecord]:
        """Возвращает снимок контейнеров."""

        client = self._create_client()
        return containers.list_containers(client)

    def fetch_container_groups(self) -> List[ContainerGroup]:
        """Возвращает снимок контейнеров, разбитый на группы по именам."""

        return group_containers(self.fetch_containers())

    # ---------------------------------------------------------------- operations
    def start_container(self, container_id: str) -> bool:
        """Запускает контейнер и возвращает True в случае успеха."""

        return self._run_action("start", containers.start_container, container_id)

    def stop_container(self, container_id: str) -> bool:
        """Останавливает контейнер."""

        return self._run_action("stop", containers.stop_container, container_id)

    def restart_container(self, container_id: str) -> bool:
        """Перезапускает контейнер."""

        return self._run_action("restart", containers.restart_container, container_id)

    def remove_container(self, container_id: str, *, force: bool = False) -> bool:
        """Удаляет контейнер."""

        return self._run_action(
            "remove",
            lambda client, cid: containers.remove_container(client, cid, force=force),
            container_id,
        )

    def fetch_container_logs(self, container_id: str, tail: int = 500) -> str:
        """Возвращает логи контейнера."""

        try:
            client = self._create_client()
            return containers.fetch_logs(client, container_id, tail=tail)
        except DockerAPIError as exc:
            LOGGER.error("Cannot fetch logs for %s: %s", container_id, exc)
            return ""

    def _run_action(self, action_name: str, func: Any, container_id: str) -> bool:
        try:
            client = self._create_client()
            func(client, container_id)
            return True
        except DockerAPIError as exc:
            LOGGER.error("Cannot %s container %s: %s", action_name, container_id, exc)
            return False
