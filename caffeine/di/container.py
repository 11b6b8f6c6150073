from __future__ import annotations

from pathlib import Path

from caffeine.domain.interfaces import IConfigService, IFileService, IHistoryHook
from caffeine.domain.models import DocumentState
from caffeine.services.config.editor_settings import EditorSettings, build_config
from caffeine.services.file_service import FileService
from caffeine.services.history import LoggingHistoryHook
from caffeine.services.ui.adapters import (
    QtFileDialogService,
    QtMessageService,
    QtTextBufferAdapter,
)
from caffeine.services.ui.dialogs import Dialogs
from caffeine.services.ui.main_window import MainWindow
from caffeine.services.ui.ports.dialogs import IFileDialogService
from caffeine.services.ui.ports.messages import IMessageService
from caffeine.services.ui.presenters.editor_presenter import EditorPresenter


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the main window with its presenter attached
    """

    def __init__(
        self,
        config: IConfigService | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
        history: IHistoryHook | None = None,
    ) -> None:
        self.config: IConfigService = config or build_config()
        self.settings = EditorSettings.from_config(self.config)
        self.file_service: IFileService = files or FileService()
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()
        self.history: IHistoryHook = history or LoggingHistoryHook()

    @staticmethod
    def default(*, explicit_ini: Path | None = None) -> Container:
        return Container(config=build_config(explicit_ini=explicit_ini))

    # ---------- UI factories ----------

    def build_presenter(self, window: MainWindow) -> EditorPresenter:
        return EditorPresenter(
            view=window,
            document=DocumentState(QtTextBufferAdapter(window.editor)),
            files=self.file_service,
            dialogs=Dialogs(self.dialogs, self.messages, parent=window),
            history=self.history,
        )

    def build_main_window(self) -> MainWindow:
        """Create the Qt MainWindow and attach a presenter bound to its text area."""
        window = MainWindow(settings=self.settings)
        window.attach_presenter(self.build_presenter(window))
        return window
