from __future__ import annotations

from .qt_dialogs import QtFileDialogService
from .qt_messages import QtMessageService
from .qt_text_buffer import QtTextBufferAdapter

__all__ = [
    "QtFileDialogService",
    "QtMessageService",
    "QtTextBufferAdapter",
]
