"""Исключения слоя доступа к Docker."""

from __future__ import annotations


class DockerAPIError(Exception):
    """Любая ошибка обращения к Docker engine, приведённая к одному типу."""
