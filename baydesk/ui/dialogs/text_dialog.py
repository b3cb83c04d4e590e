"""Диалог с текстом только для чтения и кнопкой копирования."""

from __future__ import annotations

from PySide6 import QtGui, QtWidgets

from baydesk.i18n.translator import translate


class TextDialog(QtWidgets.QDialog):
    """Показывает логи контейнера или команду входа."""

    def __init__(
        self,
        *,
        title: str,
        body: str,
        copy_text: str | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(title)
        self.resize(820, 520)
        self._copy_text = body if copy_text is None else copy_text

        layout = QtWidgets.QVBoxLayout(self)
        self._view = QtWidgets.QPlainTextEdit()
        self._view.setReadOnly(True)
        self._view.setFont(QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont))
        self._view.setPlainText(body)
        layout.addWidget(self._view)

        buttons = QtWidgets.QDialogButtonBox()
        copy_button = buttons.addButton(
            translate("actions.copy"), QtWidgets.QDialogButtonBox.ButtonRole.ActionRole
        )
        copy_button.clicked.connect(self._copy_to_clipboard)
        close_button = buttons.addButton(
            translate("actions.close"), QtWidgets.QDialogButtonBox.ButtonRole.RejectRole
        )
        close_button.clicked.connect(self.reject)
        layout.addWidget(buttons)

    def _copy_to_clipboard(self) -> None:
        QtWidgets.QApplication.clipboard().setText(self._copy_text)
