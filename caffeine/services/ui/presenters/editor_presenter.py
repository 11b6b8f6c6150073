from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Protocol, runtime_checkable

from caffeine.domain.interfaces import IFileService, IHistoryHook
from caffeine.domain.models import Command, DocumentState, HistoryAction
from caffeine.services.ui.dialogs import Dialogs, ensure_txt_suffix
from caffeine.services.ui.ports.messages import Severity
from caffeine.utils.constants import TITLE_PREFIX

logger = logging.getLogger(__name__)


@runtime_checkable
class IEditorView(Protocol):
    """Very small surface for a passive view (implemented by the Qt MainWindow)."""

    def set_title(self, title: str) -> None: ...
    def quit(self) -> None: ...


class EditorPresenter:
    """
    Runs the File menu commands against the document.

    Every command goes through ``dispatch``; the view only forwards menu
    actions and renders the title. I/O failures end here as a single error
    alert and never change the document.
    """

    def __init__(
        self,
        view: IEditorView,
        document: DocumentState,
        files: IFileService,
        dialogs: Dialogs,
        *,
        history: IHistoryHook | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.view = view
        self.document = document
        self.files = files
        self.dialogs = dialogs
        self.history = history
        self._clock = clock

        self._handlers: dict[Command, Callable[[], bool]] = {
            Command.NEW: self.new_file,
            Command.OPEN: self.open_file,
            Command.SAVE: self.save,
            Command.SAVE_AS: self.save_as,
            Command.EXIT: self.exit,
        }
        self.refresh_title()

    def dispatch(self, command: Command) -> bool:
        """Run ``command``. Returns False when it was cancelled or failed."""
        logger.debug("dispatch %s", command.name)
        return self._handlers[command]()

    # ---------- Commands ----------

    def new_file(self) -> bool:
        self.document.reset()
        self.refresh_title()
        return True

    def open_file(self) -> bool:
        path = self.dialogs.prompt_open_path()
        if path is None:
            return False
        try:
            text = self.files.read_text(path)
        except OSError as e:
            logger.warning("Open failed for %s: %s", path, e)
            self.dialogs.alert("Error", f"Could not read file: {e}", Severity.ERROR)
            return False
        self.document.load(path, text)
        self.refresh_title()
        self._record(HistoryAction.OPEN, path)
        return True

    def save(self) -> bool:
        if self.document.path is None:
            return self.save_as()
        return self._write_to(self.document.path)

    def save_as(self) -> bool:
        path = self.dialogs.prompt_save_path()
        if path is None:
            return False
        return self._write_to(ensure_txt_suffix(path))

    def exit(self) -> bool:
        self.view.quit()
        return True

    # ---------- Helpers ----------

    def refresh_title(self) -> None:
        self.view.set_title(f"{TITLE_PREFIX}{self.document.display_name}")

    def _write_to(self, path: Path) -> bool:
        text = self.document.current_text()
        try:
            self.files.write_text(path, text)
        except OSError as e:
            logger.warning("Save failed for %s: %s", path, e)
            self.dialogs.alert("Error", f"Could not save file: {e}", Severity.ERROR)
            return False
        self.document.path = path
        self.refresh_title()
        self._record(HistoryAction.SAVE, path)
        self.dialogs.alert("Success", "File saved successfully!", Severity.INFO)
        return True

    def _record(self, action: HistoryAction, path: Path) -> None:
        if self.history is None:
            return
        try:
            self.history.on_action(action, path, self._clock())
        except Exception:
            # the file operation already succeeded; a broken hook must not undo that
            logger.exception("History hook failed for %s %s", action.value, path)
