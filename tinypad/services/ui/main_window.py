from __future__ import annotations

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QTextCursor
from PyQt6.QtWidgets import (
    QApplication,
    QMainWindow,
    QPlainTextEdit,
    QStatusBar,
    QToolBar,
)

from tinypad.domain.interfaces import ISettingsService
from tinypad.services.ui.presenters.main_presenter import MainPresenter
from tinypad.utils.constants import APP_NAME, STATUS_MSEC


def _is_bmp(text: str) -> bool:
    return text.isascii() or len(text.encode("utf-16-le")) == 2 * len(text)


class MainWindow(QMainWindow):
    """Thin PyQt window; every command is forwarded to the attached MainPresenter."""

    def __init__(
        self,
        settings: ISettingsService,
        *,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(800, 600)

        self.settings = settings
        self.presenter: MainPresenter | None = None
        # set once the save prompt has already approved closing
        self._close_approved = False

        # Widgets
        self.editor = QPlainTextEdit(self)
        # history lives in EditHistory, not in the widget
        self.editor.setUndoRedoEnabled(False)
        self.setCentralWidget(self.editor)

        # UI
        self._build_actions()
        self._build_toolbar()
        self._build_menu()
        self.setStatusBar(QStatusBar(self))

        # Restore UI state
        geo = self.settings.get_geometry()
        if isinstance(geo, (bytes, bytearray)):
            self.restoreGeometry(QByteArray(geo))

        self.editor.document().contentsChange.connect(self._on_contents_change)

    def attach_presenter(self, presenter: MainPresenter) -> None:
        self.presenter = presenter

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new = QAction("New", self, triggered=self._forward("new_file"))
        self.act_open = QAction("Open…", self, triggered=self._forward("open_dialog"))
        self.act_save = QAction("Save", self, triggered=self._forward("save"))
        self.act_save_as = QAction("Save As…", self, triggered=self._forward("save_as"))
        self.act_close = QAction("Close", self, triggered=self._forward("close_document"))
        self.act_exit = QAction("Exit", self, triggered=self._forward("exit_app"))

        self.act_undo = QAction("Undo", self, triggered=self._forward("undo"))
        self.act_redo = QAction("Redo", self, triggered=self._forward("redo"))
        self.act_undo.setEnabled(False)
        self.act_redo.setEnabled(False)

        self.act_cut = QAction("Cut", self, triggered=self.editor.cut)
        self.act_copy = QAction("Copy", self, triggered=self.editor.copy)
        self.act_paste = QAction("Paste", self, triggered=self.editor.paste)

    def _build_toolbar(self):
        tb = QToolBar("Main", self)
        tb.setMovable(False)
        tb.addAction(self.act_open)
        tb.addAction(self.act_save)
        self.addToolBar(tb)

    def _build_menu(self):
        m = self.menuBar()
        filem = m.addMenu("&File")
        for a in (self.act_new, self.act_open, self.act_save, self.act_save_as):
            filem.addAction(a)
        filem.addSeparator()
        filem.addAction(self.act_close)
        filem.addAction(self.act_exit)

        editm = m.addMenu("&Edit")
        for a in (self.act_copy, self.act_cut, self.act_paste):
            editm.addAction(a)
        editm.addSeparator()
        editm.addAction(self.act_undo)
        editm.addAction(self.act_redo)

    def _forward(self, command: str):
        def _trigger(_checked: bool = False) -> None:
            if self.presenter is not None:
                getattr(self.presenter, command)()

        return _trigger

    # ---------- IMainView ----------
    def get_editor_text(self) -> str:
        # toPlainText() would turn U+00A0 into a space; raw text keeps it.
        # U+2029 is the block separator.
        return self.editor.document().toRawText().replace("\u2029", "\n")

    def set_editor_text(self, text: str, cursor_pos: int | None = None) -> None:
        self.editor.setPlainText(text)
        if cursor_pos is not None:
            c = self.editor.textCursor()
            c.setPosition(min(cursor_pos, len(text)), QTextCursor.MoveMode.MoveAnchor)
            self.editor.setTextCursor(c)

    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def set_modified(self, modified: bool) -> None:
        self.editor.document().setModified(modified)

    def set_undo_state(
        self, can_undo: bool, undo_label: str, can_redo: bool, redo_label: str
    ) -> None:
        self.act_undo.setEnabled(can_undo)
        self.act_undo.setText(undo_label)
        self.act_redo.setEnabled(can_redo)
        self.act_redo.setText(redo_label)

    def show_status(self, text: str, msec: int = STATUS_MSEC) -> None:
        self.statusBar().showMessage(text, msec)

    def close_window(self) -> None:
        self._close_approved = True
        self.close()

    def quit_app(self) -> None:
        self.close_window()
        app = QApplication.instance()
        if app is not None:
            app.quit()

    # ---------- Signals ----------
    def _on_contents_change(self, position: int, removed: int, added: int):
        if self.presenter is None:
            return
        text = self.get_editor_text()
        # Qt counts UTF-16 units; the range only matches str indexes without astral chars
        change = (position, removed, added) if _is_bmp(text) else None
        self.presenter.on_text_edited(text, change)

    # ---------- Close ----------
    def closeEvent(self, event):
        if not self._close_approved and self.presenter is not None:
            if not self.presenter.request_close():
                event.ignore()
                return
        self._close_approved = False
        self.settings.set_geometry(bytes(self.saveGeometry()))
        super().closeEvent(event)
