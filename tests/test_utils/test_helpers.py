"""Тесты вспомогательных утилит."""

from __future__ import annotations

import pytest

from baydesk.utils.helpers import normalize_socket_path


def test_bare_path_gets_unix_scheme() -> None:
    assert normalize_socket_path(" /var/run/docker.sock ") == "unix:///var/run/docker.sock"


@pytest.mark.parametrize(
    "value",
    [
        "unix:///var/run/docker.sock",
        "TCP://127.0.0.1:2375",
        "ssh://me@host",
        "npipe:////./pipe/docker_engine",
    ],
)
def test_existing_scheme_is_kept(value: str) -> None:
    assert normalize_socket_path(value) == value


def test_empty_and_relative_values_pass_through() -> None:
    assert normalize_socket_path("   ") == ""
    assert normalize_socket_path("custom-socket") == "custom-socket"
