"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path

# BAYDESK_HOME переопределяет домашний каталог (используется в тестах и CI)
HOME_DIR = Path(os.environ.get("BAYDESK_HOME", Path.home()))

# CONFIG_DIR — базовая директория, где сохраняются настройки и логи
CONFIG_DIR = HOME_DIR / ".baydesk"
