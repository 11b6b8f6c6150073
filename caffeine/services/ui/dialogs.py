from __future__ import annotations

from pathlib import Path
from typing import Any

from caffeine.services.ui.ports.dialogs import IFileDialogService
from caffeine.services.ui.ports.messages import IMessageService, Severity
from caffeine.utils.constants import TEXT_FILE_FILTER, TEXT_SUFFIX


def ensure_txt_suffix(path: Path) -> Path:
    """Append ``.txt`` unless the file name already ends with it (any case)."""
    if path.name.lower().endswith(TEXT_SUFFIX):
        return path
    return path.with_name(path.name + TEXT_SUFFIX)


class Dialogs:
    """File pickers and alerts used by the editor commands."""

    def __init__(
        self,
        files: IFileDialogService,
        messages: IMessageService,
        parent: Any | None = None,
    ) -> None:
        self._files = files
        self._messages = messages
        self.parent = parent

    def prompt_open_path(self) -> Path | None:
        return self._files.get_open_file(self.parent, "Open Text File", None, TEXT_FILE_FILTER)

    def prompt_save_path(self) -> Path | None:
        return self._files.get_save_file(self.parent, "Save Text File", None, TEXT_FILE_FILTER)

    def alert(self, title: str, message: str, severity: Severity = Severity.INFO) -> None:
        if severity is Severity.ERROR:
            self._messages.error(self.parent, title, message)
        else:
            self._messages.info(self.parent, title, message)
