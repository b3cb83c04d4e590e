"""Обёртка над docker-py с безопасной инициализацией."""

from __future__ import annotations

import logging
from typing import Any

import docker
from docker.errors import DockerException

from baydesk.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Управляет созданием и использованием docker API client."""

    def __init__(self, base_url: str, raw_client: Any | None = None) -> None:
        self.base_url = base_url  # адрес Docker engine (unix://, tcp://, ssh://)
        self._client = raw_client or self._create_client()

    def _create_client(self) -> Any:
        try:
            if self.base_url:
                return docker.DockerClient(base_url=self.base_url)
            return docker.from_env()
        except DockerException as exc:
            LOGGER.error("Docker client init error via %s: %s", self.base_url or "env", exc)
            raise DockerAPIError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client."""

        return self._client

