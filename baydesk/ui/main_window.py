"""Главное окно baydesk: дерево групп контейнеров, опрос Docker и действия."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List

from PySide6 import QtCore, QtGui, QtWidgets

from baydesk.docker_api.containers import login_command
from baydesk.docker_api.data_provider import DockerDataProvider
from baydesk.docker_api.exceptions import DockerAPIError
from baydesk.grouping import ContainerGroup, ContainerRecord
from baydesk.i18n.translator import translate
from baydesk.settings.observers import CallbackSettingsObserver
from baydesk.settings.registry import SettingsRegistry
from baydesk.ui.dialogs import TextDialog
from baydesk.ui.snapshot_gate import SnapshotGate
from baydesk.ui.widgets.container_tree import ColumnDefinition, ContainerGroupTree, RowAction
from baydesk.ui.widgets.footer import FooterWidget
from baydesk.utils.system_metrics import read_system_metrics


class MainWindow(QtWidgets.QMainWindow):
    """Главное окно со списком контейнеров, сгруппированных по именам."""

    def __init__(
        self,
        *,
        settings: SettingsRegistry,
        docker_data_provider: DockerDataProvider,
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._settings = settings
        self._docker_data_provider = docker_data_provider
        self._refresh_button = QtWidgets.QPushButton(translate("actions.refresh"))
        self._refresh_button.clicked.connect(self._on_refresh_button_clicked)
        self._status_label = QtWidgets.QLabel()
        self._footer = FooterWidget()
        self._refresh_timer = QtCore.QTimer(self)
        self._refresh_timer.timeout.connect(self._on_auto_refresh_timer)
        self._system_metrics_timer = QtCore.QTimer(self)
        self._system_metrics_timer.timeout.connect(self._update_system_metrics)
        self._workers: List[ContainerFetchThread] = []
        self._snapshots = SnapshotGate()
        self._last_refresh_at: datetime | None = None

        self._tree = self._create_container_tree()
        self._refresh_observer = CallbackSettingsObserver(
            "refresh", self._on_refresh_settings_changed
        )
        self._settings.register_observer(self._refresh_observer)
        self._setup_window()
        self._apply_initial_window_state()
        self._refresh_data()
        self._start_auto_refresh()
        self._start_system_metrics_timer()

    # ------------------------------------------------------------------- setup
    def _setup_window(self) -> None:
        self.setWindowTitle(translate("app.title"))
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)

        top_panel = QtWidgets.QHBoxLayout()
        top_panel.addWidget(self._status_label)
        top_panel.addStretch()
        top_panel.addWidget(self._refresh_button)
        layout.addLayout(top_panel)
        layout.addWidget(self._tree, stretch=1)
        layout.addWidget(self._footer)
        self.setCentralWidget(central)

        refresh_shortcut = QtGui.QShortcut(QtGui.QKeySequence("F5"), self)
        refresh_shortcut.activated.connect(self._on_refresh_button_clicked)

    def _apply_initial_window_state(self) -> None:
        app_group = self._settings.section("app")
        self.resize(app_group.get("window_width"), app_group.get("window_height"))
        self.move(app_group.get("window_x"), app_group.get("window_y"))
        if app_group.get("window_maximized"):
            self.showMaximized()

    def _create_container_tree(self) -> ContainerGroupTree:
        columns = [
            ColumnDefinition(translate("tables.name"), "label"),
            ColumnDefinition(translate("tables.id"), "id"),
            ColumnDefinition(translate("tables.image"), "image"),
            ColumnDefinition(translate("tables.status"), "status"),
            ColumnDefinition(translate("tables.ports"), "ports"),
        ]
        row_actions = [
            RowAction("▶", translate("actions.start"), self._start_container),
            RowAction("■", translate("actions.stop"), self._stop_container),
            RowAction("↻", translate("actions.restart"), self._restart_container),
            RowAction("📄", translate("actions.logs"), self._show_logs),
            RowAction("⌨", translate("actions.login"), self._show_login_command),
            RowAction("🗑", translate("actions.delete"), self._delete_container),
        ]
        tree = ContainerGroupTree(
            columns=columns,
            row_actions=row_actions,
            only_running=bool(self._settings.get_value("ui_state", "only_running")),
        )
        tree.only_running_checkbox.toggled.connect(
            lambda checked: self._settings.set_value("ui_state", "only_running", bool(checked))
        )
        widths = self._settings.get_value("ui_state", "column_widths")
        for index, width in enumerate(widths or []):
            if isinstance(width, int) and width > 0:
                tree.tree.setColumnWidth(index, width)
        return tree

    # --------------------------------------------------------------- data fetch
    def _on_refresh_button_clicked(self) -> None:
        self._refresh_data()

    def _on_auto_refresh_timer(self) -> None:
        # тик таймера пропускается, пока предыдущий запрос не завершился
        if self._workers:
            return
        self._refresh_data()

    def _refresh_data(self) -> None:
        """Запрашивает новый снимок в фоне.

        Перекрывающиеся запросы допустимы: результат применяется, только если
        он новее уже показанного.
        """

        generation = self._snapshots.next()
        if not self._snapshots.has_applied:
            self._status_label.setText(translate("status.loading"))
        worker = ContainerFetchThread(
            provider=self._docker_data_provider,
            generation=generation,
        )
        worker.data_ready.connect(self._on_groups_ready)
        worker.error.connect(self._on_fetch_error)
        worker.finished.connect(lambda w=worker: self._forget_worker(w))
        self._workers.append(worker)
        worker.start()

    def _forget_worker(self, worker: "ContainerFetchThread") -> None:
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def _on_groups_ready(self, generation: int, groups: List[ContainerGroup]) -> None:
        if not self._snapshots.accept(generation):
            return
        self._tree.set_groups(groups)
        self._footer.update_engine_status(True)
        self._footer.update_counts(
            containers=sum(group.size for group in groups), groups=len(groups)
        )
        self._last_refresh_at = datetime.now()
        timestamp = self._last_refresh_at.strftime("%H:%M:%S")
        self._status_label.setText(translate("status.last_updated").format(timestamp=timestamp))

    def _on_fetch_error(self, generation: int, message: str) -> None:
        if not self._snapshots.accept(generation):
            return
        self._logger.error("Container refresh failed: %s", message)
        self._footer.update_engine_status(False)
        self._tree.show_placeholder(translate("status.error").format(message=message))
        self._status_label.setText(translate("status.error").format(message=message))

    def _start_auto_refresh(self) -> None:
        self._refresh_timer.stop()
        refresh_group = self._settings.section("refresh")
        if not refresh_group.get("auto_refresh_enabled"):
            return
        self._refresh_timer.start(int(refresh_group.get("refresh_rate_ms")))

    def _on_refresh_settings_changed(self, key: str, _value: object) -> None:
        if key.startswith("system_metrics"):
            self._start_system_metrics_timer()
        else:
            self._start_auto_refresh()

    def _start_system_metrics_timer(self) -> None:
        self._system_metrics_timer.stop()
        refresh_group = self._settings.section("refresh")
        if not refresh_group.get("system_metrics_enabled"):
            return
        self._system_metrics_timer.start(int(refresh_group.get("system_metrics_refresh_ms")))
        self._update_system_metrics()

    def _update_system_metrics(self) -> None:
        metrics = read_system_metrics()
        self._footer.update_stats(ram=metrics.ram, cpu=metrics.cpu)

    # ---------------------------------------------------------------- actions
    def _start_container(self, record: ContainerRecord) -> None:
        self._execute_container_action(
            self._docker_data_provider.start_container, record, action_name="start"
        )

    def _stop_container(self, record: ContainerRecord) -> None:
        self._execute_container_action(
            self._docker_data_provider.stop_container, record, action_name="stop"
        )

    def _restart_container(self, record: ContainerRecord) -> None:
        self._execute_container_action(
            self._docker_data_provider.restart_container, record, action_name="restart"
        )

    def _delete_container(self, record: ContainerRecord) -> None:
        answer = QtWidgets.QMessageBox.question(
            self,
            translate("actions.delete"),
            translate("messages.confirm_delete").format(name=record.label),
        )
        if answer != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        self._execute_container_action(
            lambda container_id: self._docker_data_provider.remove_container(
                container_id, force=True
            ),
            record,
            action_name="delete",
        )

    def _show_logs(self, record: ContainerRecord) -> None:
        logs = self._docker_data_provider.fetch_container_logs(record.id)
        dialog = TextDialog(
            title=translate("logs.title").format(name=record.label),
            body=logs or translate("logs.empty"),
            copy_text=logs,
            parent=self,
        )
        dialog.exec()

    def _show_login_command(self, record: ContainerRecord) -> None:
        dialog = TextDialog(
            title=translate("login.title").format(name=record.label),
            body=login_command(record),
            parent=self,
        )
        dialog.exec()

    def _execute_container_action(
        self,
        func: Callable[[str], bool],
        record: ContainerRecord,
        *,
        action_name: str,
    ) -> None:
        self._logger.info(
            "Container action %s requested: container_id=%s, name=%s",
            action_name,
            record.id,
            record.label,
        )
        try:
            success = func(record.id)
        except DockerAPIError as exc:
            self._show_error(str(exc))
            return
        if success:
            self._refresh_data()
        else:
            self._show_error(translate("messages.action_failed"))

    def _show_error(self, message: str) -> None:
        self._logger.error("UI error: %s", message)
        QtWidgets.QMessageBox.critical(self, translate("messages.error_title"), message)

    # ------------------------------------------------------------------ close
    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._settings.unregister_observer(self._refresh_observer)
        self._refresh_timer.stop()
        self._system_metrics_timer.stop()
        for worker in list(self._workers):
            worker.requestInterruption()
            worker.wait(2000)
        maximized = self.isMaximized()
        self._settings.set_value("app", "window_maximized", maximized)
        if not maximized:
            geometry = self.geometry()
            self._settings.set_value("app", "window_width", max(geometry.width(), 640))
            self._settings.set_value("app", "window_height", max(geometry.height(), 480))
            self._settings.set_value("app", "window_x", geometry.x())
            self._settings.set_value("app", "window_y", geometry.y())
        header = self._tree.tree.header()
        self._settings.set_value(
            "ui_state",
            "column_widths",
            [header.sectionSize(index) for index in range(header.count())],
        )
        self._settings.save()
        super().closeEvent(event)


def create_main_window(
    *,
    settings: SettingsRegistry,
    docker_data_provider: DockerDataProvider,
) -> MainWindow:
    """Фабрика главного окна."""

    return MainWindow(settings=settings, docker_data_provider=docker_data_provider)


class ContainerFetchThread(QtCore.QThread):
    """Фоновый запрос снимка контейнеров и его группировка."""

    data_ready = QtCore.Signal(int, list)
    error = QtCore.Signal(int, str)

    def __init__(self, *, provider: DockerDataProvider, generation: int) -> None:
        super().__init__()
        self._provider = provider
        self._generation = generation

    def run(self) -> None:
        try:
            if self.isInterruptionRequested():
                return
            groups = self._provider.fetch_container_groups()
            if self.isInterruptionRequested():
                return
            self.data_ready.emit(self._generation, groups)
        except DockerAPIError as exc:
            self.error.emit(self._generation, str(exc))
