from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Protocol, runtime_checkable

from caffeine.utils.constants import UNTITLED


class Command(Enum):
    """Menu commands understood by the editor presenter."""

    NEW = auto()
    OPEN = auto()
    SAVE = auto()
    SAVE_AS = auto()
    EXIT = auto()


class HistoryAction(Enum):
    OPEN = "open"
    SAVE = "save"


@runtime_checkable
class TextBuffer(Protocol):
    """Anything holding the editable text. A QPlainTextEdit satisfies this as-is."""

    def toPlainText(self) -> str: ...
    def setPlainText(self, text: str) -> None: ...


class MemoryBuffer:
    """Plain in-memory TextBuffer used when no widget is around (tests, headless)."""

    def __init__(self, text: str = "") -> None:
        self._text = text

    def toPlainText(self) -> str:
        return self._text

    def setPlainText(self, text: str) -> None:
        self._text = text


@dataclass(frozen=True)
class FileReference:
    path: Path

    @property
    def display_name(self) -> str:
        return self.path.name


class DocumentState:
    """
    The single open document: its text buffer plus the associated path.

    The buffer is authoritative for the text. ``path is None`` means the
    document is untitled.
    """

    def __init__(self, buffer: TextBuffer | None = None) -> None:
        self.buffer: TextBuffer = buffer if buffer is not None else MemoryBuffer()
        self.path: Path | None = None

    def reset(self) -> None:
        self.buffer.setPlainText("")
        self.path = None

    def load(self, path: Path, text: str) -> None:
        self.buffer.setPlainText(text)
        self.path = path

    def current_text(self) -> str:
        return self.buffer.toPlainText()

    def set_text(self, text: str) -> None:
        self.buffer.setPlainText(text)

    def has_associated_path(self) -> bool:
        return self.path is not None

    @property
    def display_name(self) -> str:
        if self.path is None:
            return UNTITLED
        return FileReference(self.path).display_name
