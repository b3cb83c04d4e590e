"""Дерево контейнеров, сгруппированных по общим фрагментам имён."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, Set

from PySide6 import QtCore, QtGui, QtWidgets

from baydesk.grouping import ContainerGroup, ContainerRecord
from baydesk.i18n.translator import translate

RUNNING_COLOR = "#00c853"
STOPPED_COLOR = "#9e9e9e"
RECORD_ROLE = QtCore.Qt.ItemDataRole.UserRole
GROUP_KEY_ROLE = int(QtCore.Qt.ItemDataRole.UserRole) + 1


@dataclass(slots=True)
class ColumnDefinition:
    """Описание одной колонки: заголовок и атрибут ContainerRecord."""

    header: str
    attribute: str

    def render(self, record: ContainerRecord) -> str:
        value = getattr(record, self.attribute, "")
        return str(value) if value else "-"


@dataclass(slots=True)
class RowAction:
    """Кнопка действия над строкой контейнера."""

    label: str
    tooltip: str
    callback: Callable[[ContainerRecord], None]


def group_summary(group: ContainerGroup) -> str:
    """Текст заголовка группы: ``running: 2 · stopped: 1``."""

    return (
        f"{translate('groups.running')}: {group.running_count} · "
        f"{translate('groups.stopped')}: {group.stopped_count}"
    )


class ContainerGroupTree(QtWidgets.QWidget):
    """Отображает группы: одиночные как обычные строки, остальные как
    сворачиваемые заголовки с дочерними строками.

    Состояние раскрытия хранится здесь, по ключу группы, и не влияет на
    саму группировку.
    """

    def __init__(
        self,
        *,
        columns: Sequence[ColumnDefinition],
        row_actions: Sequence[RowAction] | None = None,
        only_running: bool = False,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._columns = list(columns)
        self._row_actions = list(row_actions) if row_actions else []
        self._groups: List[ContainerGroup] = []
        self._expanded: Set[str] = set()
        self._placeholder_text = translate("tables.no_data")
        self._column_count = len(self._columns) + (1 if self._row_actions else 0)
        self._setup_ui(only_running)

    # ------------------------------------------------------------------ setup
    def _setup_ui(self, only_running: bool) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        controls = QtWidgets.QHBoxLayout()
        self._search = QtWidgets.QLineEdit()
        self._search.setPlaceholderText(translate("tables.search_placeholder"))
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self._refresh_view)
        controls.addWidget(self._search)
        controls.addStretch()

        self._only_running = QtWidgets.QCheckBox(translate("tables.only_running"))
        self._only_running.setChecked(only_running)
        self._only_running.stateChanged.connect(self._refresh_view)
        controls.addWidget(self._only_running)
        layout.addLayout(controls)

        self._tree = QtWidgets.QTreeWidget()
        headers = [column.header for column in self._columns]
        if self._row_actions:
            headers.append("")
        self._tree.setHeaderLabels(headers)
        header = self._tree.header()
        header.setStretchLastSection(True)
        header.setSectionResizeMode(QtWidgets.QHeaderView.ResizeMode.Interactive)
        self._tree.setUniformRowHeights(True)
        self._tree.setAlternatingRowColors(True)
        self._tree.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self._tree.itemExpanded.connect(self._on_item_expanded)
        self._tree.itemCollapsed.connect(self._on_item_collapsed)
        layout.addWidget(self._tree)

    @property
    def tree(self) -> QtWidgets.QTreeWidget:
        return self._tree

    @property
    def only_running_checkbox(self) -> QtWidgets.QCheckBox:
        return self._only_running

    # ----------------------------------------------------------------- data api
    def set_groups(self, groups: Iterable[ContainerGroup]) -> None:
        """Заменяет отображаемые группы новым снимком."""

        self._placeholder_text = translate("tables.no_data")
        self._groups = list(groups)
        live_keys = {group.key for group in self._groups if group.is_collapsible}
        self._expanded &= live_keys
        self._refresh_view()

    def show_placeholder(self, message: str) -> None:
        self._groups = []
        self._placeholder_text = message or translate("tables.no_data")
        self._refresh_view()

    def current_record(self) -> ContainerRecord | None:
        """Запись выбранной строки; для заголовка группы возвращает None."""

        item = self._tree.currentItem()
        if item is None:
            return None
        data = item.data(0, RECORD_ROLE)
        return data if isinstance(data, ContainerRecord) else None

    # --------------------------------------------------------------- rendering
    def _refresh_view(self) -> None:
        self._tree.clear()
        groups = self._apply_filters()
        if not groups:
            placeholder = QtWidgets.QTreeWidgetItem(
                [self._placeholder_text] + [""] * (self._column_count - 1)
            )
            placeholder.setFlags(QtCore.Qt.ItemFlag.ItemIsEnabled)
            font = placeholder.font(0)
            font.setItalic(True)
            placeholder.setFont(0, font)
            self._tree.addTopLevelItem(placeholder)
            return

        for group in groups:
            if not group.is_collapsible:
                self._create_record_item(group.members[0], None)
                continue
            header = self._create_group_item(group)
            for record in group.members:
                self._create_record_item(record, header)
            header.setExpanded(group.key in self._expanded)

    def _create_group_item(self, group: ContainerGroup) -> QtWidgets.QTreeWidgetItem:
        values = [group.key, group_summary(group)] + [""] * (self._column_count - 2)
        item = QtWidgets.QTreeWidgetItem(self._tree, values)
        item.setFlags(item.flags() & ~QtCore.Qt.ItemFlag.ItemIsSelectable)
        item.setData(0, GROUP_KEY_ROLE, group.key)
        font = item.font(0)
        font.setBold(True)
        item.setFont(0, font)
        color = RUNNING_COLOR if group.has_running else STOPPED_COLOR
        item.setForeground(0, QtGui.QBrush(QtGui.QColor(color)))
        return item

    def _create_record_item(
        self,
        record: ContainerRecord,
        parent: QtWidgets.QTreeWidgetItem | None,
    ) -> None:
        values = [column.render(record) for column in self._columns]
        if self._row_actions:
            values.append("")
        if parent is None:
            item = QtWidgets.QTreeWidgetItem(self._tree, values)
        else:
            item = QtWidgets.QTreeWidgetItem(parent, values)
        item.setData(0, RECORD_ROLE, record)
        for index in range(len(self._columns)):
            item.setToolTip(index, values[index])
        if record.is_running:
            item.setForeground(0, QtGui.QBrush(QtGui.QColor(RUNNING_COLOR)))
        if self._row_actions:
            self._attach_row_actions(item, record)

    def _attach_row_actions(self, item: QtWidgets.QTreeWidgetItem, record: ContainerRecord) -> None:
        container = QtWidgets.QWidget()
        layout = QtWidgets.QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        for action in self._row_actions:
            button = QtWidgets.QToolButton()
            button.setText(action.label)
            button.setToolTip(action.tooltip)
            button.clicked.connect(lambda _checked=False, cb=action.callback, r=record: cb(r))
            layout.addWidget(button)
        layout.addStretch()
        self._tree.setItemWidget(item, self._column_count - 1, container)

    # ------------------------------------------------------------- expansion
    def _on_item_expanded(self, item: QtWidgets.QTreeWidgetItem) -> None:
        key = item.data(0, GROUP_KEY_ROLE)
        if isinstance(key, str):
            self._expanded.add(key)

    def _on_item_collapsed(self, item: QtWidgets.QTreeWidgetItem) -> None:
        key = item.data(0, GROUP_KEY_ROLE)
        if isinstance(key, str):
            self._expanded.discard(key)

    # -------------------------------------------------------------- filtering
    def _apply_filters(self) -> List[ContainerGroup]:
        """Фильтрует группы целиком, не меняя их состав."""

        groups = list(self._groups)
        if self._only_running.isChecked():
            groups = [group for group in groups if group.has_running]

        query = self._search.text().strip().lower()
        if not query:
            return groups
        return [group for group in groups if self._group_matches(group, query)]

    def _group_matches(self, group: ContainerGroup, query: str) -> bool:
        if query in group.key.lower():
            return True
        for record in group.members:
            for column in self._columns:
                if query in column.render(record).lower():
                    return True
        return False
