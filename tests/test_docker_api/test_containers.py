"""Тесты функций docker_api.containers на подставном docker client."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest
from docker.errors import DockerException
from requests.exceptions import ConnectionError as RequestsConnectionError

from baydesk.docker_api import containers
from baydesk.docker_api.client import DockerClientWrapper
from baydesk.docker_api.exceptions import DockerAPIError
from baydesk.grouping import ContainerRecord


class FakeContainer:
    def __init__(self, *, paused: bool = False, fail: bool = False) -> None:
        self.paused = paused
        self.fail = fail
        self.calls: List[str] = []

    def _check(self, action: str) -> None:
        self.calls.append(action)
        if self.fail:
            raise DockerException(f"{action} failed")

    def start(self) -> None:
        if self.paused:
            self.calls.append("start")
            raise DockerException("Container abc is paused, unpause the container first")
        self._check("start")

    def unpause(self) -> None:
        self._check("unpause")

    def stop(self) -> None:
        self._check("stop")

    def restart(self) -> None:
        self._check("restart")

    def remove(self, force: bool = False) -> None:
        self._check(f"remove(force={force})")

    def logs(self, tail: int = 500) -> bytes:
        self._check(f"logs({tail})")
        return b"line one\nline two\n"


class FakeRawClient:
    def __init__(self, summaries: List[Dict[str, Any]], container: FakeContainer) -> None:
        outer = self

        class Containers:
            def get(self, container_id: str) -> FakeContainer:
                return outer.container

        class API:
            def containers(self, all: bool = False) -> List[Dict[str, Any]]:
                assert all is True
                return outer.summaries

        self.summaries = summaries
        self.container = container
        self.containers = Containers()
        self.api = API()


SUMMARIES = [
    {
        "Id": "0123456789abcdef0123",
        "Names": ["/web-1"],
        "Image": "nginx:latest",
        "State": "running",
        "Status": "Up 2 minutes",
        "Ports": [
            {"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"},
            {"IP": "0.0.0.0", "PrivatePort": 80, "PublicPort": 8080, "Type": "tcp"},
            {"PrivatePort": 443, "Type": "tcp"},
        ],
    },
    {
        "Id": "fedcba9876543210",
        "Names": [],
        "Image": "redis",
        "State": "exited",
        "Status": "Exited (0) 3 hours ago",
        "Ports": None,
    },
]


def make_wrapper(container: FakeContainer | None = None) -> DockerClientWrapper:
    raw = FakeRawClient(SUMMARIES, container or FakeContainer())
    return DockerClientWrapper("unix:///var/run/docker.sock", raw_client=raw)


def test_list_containers_builds_records() -> None:
    records = containers.list_containers(make_wrapper())

    assert records[0] == ContainerRecord(
        id="0123456789ab",
        name="web-1",
        state="running",
        image="nginx:latest",
        status="Up 2 minutes",
        ports="0.0.0.0:8080->80/tcp, 443/tcp",
    )
    assert records[1].name == ""
    assert records[1].label == "fedcba987654"
    assert records[1].ports == ""
    assert not records[1].is_running


def test_list_containers_wraps_sdk_errors() -> None:
    wrapper = make_wrapper()

    def broken(all: bool = False) -> List[Dict[str, Any]]:
        raise DockerException("socket closed")

    wrapper.get_raw_client().api.containers = broken
    with pytest.raises(DockerAPIError):
        containers.list_containers(wrapper)


def test_list_containers_wraps_dropped_connection() -> None:
    wrapper = make_wrapper()

    def dropped(all: bool = False) -> List[Dict[str, Any]]:
        raise RequestsConnectionError("Connection aborted")

    wrapper.get_raw_client().api.containers = dropped
    with pytest.raises(DockerAPIError, match="Connection aborted"):
        containers.list_containers(wrapper)


def test_lifecycle_operations() -> None:
    container = FakeContainer()
    wrapper = make_wrapper(container)

    containers.start_container(wrapper, "abc")
    containers.stop_container(wrapper, "abc")
    containers.restart_container(wrapper, "abc")
    containers.remove_container(wrapper, "abc", force=True)

    assert container.calls == ["start", "stop", "restart", "remove(force=True)"]


def test_start_paused_container_unpauses() -> None:
    container = FakeContainer(paused=True)
    containers.start_container(make_wrapper(container), "abc")

    assert container.calls == ["start", "unpause"]


def test_operation_errors_are_wrapped() -> None:
    wrapper = make_wrapper(FakeContainer(fail=True))

    with pytest.raises(DockerAPIError, match="stop failed"):
        containers.stop_container(wrapper, "abc")


def test_fetch_logs_decodes_bytes() -> None:
    container = FakeContainer()
    logs = containers.fetch_logs(make_wrapper(container), "abc", tail=10)

    assert logs == "line one\nline two\n"
    assert container.calls == ["logs(10)"]


def test_login_command_uses_name_or_id() -> None:
    assert containers.login_command(ContainerRecord(id="abc", name="web-1")) == (
        "docker exec -it web-1 sh"
    )
    assert containers.login_command(ContainerRecord(id="abc", name="")) == (
        "docker exec -it abc sh"
    )
    assert containers.login_command(ContainerRecord(id="abc", name="odd name"), shell="bash") == (
        "docker exec -it 'odd name' bash"
    )
