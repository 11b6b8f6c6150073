from __future__ import annotations

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QApplication, QMainWindow, QPlainTextEdit

from caffeine.domain.models import Command
from caffeine.services.config.editor_settings import EditorSettings
from caffeine.services.ui.presenters.editor_presenter import EditorPresenter
from caffeine.utils.constants import TITLE_PREFIX, UNTITLED


class MainWindow(QMainWindow):
    """Thin PyQt window: a menu bar over a plain-text area, commands go to the presenter."""

    def __init__(self, settings: EditorSettings | None = None) -> None:
        super().__init__()
        settings = settings or EditorSettings()
        self.setWindowTitle(f"{TITLE_PREFIX}{UNTITLED}")
        self.resize(settings.width, settings.height)

        self.presenter: EditorPresenter | None = None

        # Widgets
        self.editor = QPlainTextEdit(self)
        self._set_wrap(settings.wrap)
        self.setCentralWidget(self.editor)

        # UI
        self._build_actions()
        self._build_menu()

    # ---------- UI creation ----------
    def _build_actions(self):
        self.act_new = QAction(
            "New",
            self,
            shortcut=QKeySequence.StandardKey.New,
            triggered=lambda: self._run(Command.NEW),
        )
        self.act_open = QAction(
            "Open...",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=lambda: self._run(Command.OPEN),
        )
        self.act_save = QAction(
            "Save",
            self,
            shortcut=QKeySequence.StandardKey.Save,
            triggered=lambda: self._run(Command.SAVE),
        )
        self.act_save_as = QAction(
            "Save As...",
            self,
            shortcut=QKeySequence.StandardKey.SaveAs,
            triggered=lambda: self._run(Command.SAVE_AS),
        )
        self.act_exit = QAction(
            "Exit",
            self,
            shortcut=QKeySequence.StandardKey.Quit,
            triggered=lambda: self._run(Command.EXIT),
        )

        # Placeholder until recent-file history has a store behind it
        self.act_view_history = QAction("View Recent Files...", self)

    def _build_menu(self):
        m = self.menuBar()
        self.file_menu = m.addMenu("File")
        self.file_menu.addAction(self.act_new)
        self.file_menu.addAction(self.act_open)
        self.file_menu.addAction(self.act_save)
        self.file_menu.addAction(self.act_save_as)
        self.file_menu.addSeparator()
        self.file_menu.addAction(self.act_exit)

        self.history_menu = m.addMenu("History")
        self.history_menu.addAction(self.act_view_history)

    def _set_wrap(self, on: bool) -> None:
        mode = (
            QPlainTextEdit.LineWrapMode.WidgetWidth
            if on
            else QPlainTextEdit.LineWrapMode.NoWrap
        )
        self.editor.setLineWrapMode(mode)

    # ---------- Presenter wiring ----------
    def attach_presenter(self, presenter: EditorPresenter) -> None:
        self.presenter = presenter

    def _run(self, command: Command) -> None:
        if self.presenter is not None:
            self.presenter.dispatch(command)

    # ---------- IEditorView ----------
    def set_title(self, title: str) -> None:
        self.setWindowTitle(title)

    def quit(self) -> None:
        self.close()
        app = QApplication.instance()
        if app is not None:
            app.quit()
