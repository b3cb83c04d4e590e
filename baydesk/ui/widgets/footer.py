"""Футер со статусом Docker engine и загрузкой хоста."""

from __future__ import annotations

from PySide6 import QtWidgets

from baydesk.i18n.translator import translate


class FooterWidget(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(24)

        self._engine_label = QtWidgets.QLabel(translate("footer.engine_running"))
        layout.addWidget(self._engine_label)

        self._stats_label = QtWidgets.QLabel()
        layout.addWidget(self._stats_label)
        layout.addStretch()

        self._groups_label = QtWidgets.QLabel()
        layout.addWidget(self._groups_label)
        self.update_stats(ram="N/A", cpu="N/A")

    def update_engine_status(self, reachable: bool) -> None:
        key = "footer.engine_running" if reachable else "footer.engine_stopped"
        self._engine_label.setText(translate(key))

    def update_stats(self, *, ram: str, cpu: str) -> None:
        self._stats_label.setText(
            f"{translate('footer.stat_ram')}: {ram}   {translate('footer.stat_cpu')}: {cpu}"
        )

    def update_counts(self, *, containers: int, groups: int) -> None:
        """Показывает размер последнего снимка: контейнеры / группы."""

        self._groups_label.setText(f"{containers} / {groups}")
