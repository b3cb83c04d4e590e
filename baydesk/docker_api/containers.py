"""Функции для работы с контейнерами через Docker client."""

from __future__ import annotations

import shlex
from typing import Any, Dict, Iterable, List

from docker.errors import DockerException
from requests.exceptions import RequestException

from baydesk.docker_api.client import DockerClientWrapper
from baydesk.docker_api.exceptions import DockerAPIError
from baydesk.grouping.models import ContainerRecord

LOGIN_SHELL = "sh"
# обрыв соединения с engine приходит из requests, минуя DockerException
API_ERRORS = (DockerException, RequestException)


def list_containers(client: DockerClientWrapper) -> List[ContainerRecord]:
    """Возвращает снимок всех контейнеров (аналог ``docker ps -a``)."""

    raw = client.get_raw_client()
    try:
        summaries = raw.api.containers(all=True)
    except API_ERRORS as exc:
        raise DockerAPIError(str(exc)) from exc
    return [_to_record(summary) for summary in summaries]


def start_container(client: DockerClientWrapper, container_id: str) -> None:
    """Запускает контейнер, снимая паузу, если он приостановлен."""

    raw = client.get_raw_client()
    try:
        container = raw.containers.get(container_id)
        container.start()
    except API_ERRORS as exc:
        if "paused" in str(exc).lower():
            try:
                raw.containers.get(container_id).unpause()
                return
            except API_ERRORS as unpause_exc:
                raise DockerAPIError(str(unpause_exc)) from unpause_exc
        raise DockerAPIError(str(exc)) from exc


def stop_container(client: DockerClientWrapper, container_id: str) -> None:
    """Останавливает контейнер."""

    raw = client.get_raw_client()
    try:
        raw.containers.get(container_id).stop()
    except API_ERRORS as exc:
        raise DockerAPIError(str(exc)) from exc


def restart_container(client: DockerClientWrapper, container_id: str) -> None:
    """Перезапускает контейнер."""

    raw = client.get_raw_client()
    try:
        raw.containers.get(container_id).restart()
    except API_ERRORS as exc:
        raise DockerAPIError(str(exc)) from exc


def remove_container(client: DockerClientWrapper, container_id: str, force: bool = False) -> None:
    """Удаляет контейнер."""

    raw = client.get_raw_client()
    try:
        raw.containers.get(container_id).remove(force=force)
    except API_ERRORS as exc:
        raise DockerAPIError(str(exc)) from exc


def fetch_logs(client: DockerClientWrapper, container_id: str, *, tail: int = 500) -> str:
    """Возвращает строку логов контейнера."""

    raw = client.get_raw_client()
    try:
        data = raw.containers.get(container_id).logs(tail=tail)
    except API_ERRORS as exc:
        raise DockerAPIError(str(exc)) from exc
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="ignore")
    return str(data)


def login_command(record: ContainerRecord, shell: str = LOGIN_SHELL) -> str:
    """Команда для входа в контейнер, которую пользователь может скопировать."""

    target = record.name.strip() or record.id
    return f"docker exec -it {shlex.quote(target)} {shell}"


def _to_record(summary: Dict[str, Any]) -> ContainerRecord:
    names = summary.get("Names") or []
    name = names[0].lstrip("/") if names else ""
    return ContainerRecord(
        id=str(summary.get("Id", ""))[:12],
        name=name,
        state=str(summary.get("State") or ""),
        image=str(summary.get("Image") or ""),
        status=str(summary.get("Status") or ""),
        ports=_format_ports(summary.get("Ports") or []),
    )


def _format_ports(ports: Iterable[Dict[str, Any]]) -> str:
    result = []
    for port in ports:
        private = f"{port.get('PrivatePort')}/{port.get('Type', 'tcp')}"
        public = port.get("PublicPort")
        if public:
            host_ip = port.get("IP") or "0.0.0.0"
            result.append(f"{host_ip}:{public}->{private}")
        else:
            result.append(private)
    # docker отдаёт одну привязку на IPv4 и IPv6, повторы не нужны
    return ", ".join(dict.fromkeys(result))
