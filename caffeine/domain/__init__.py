"""Domain layer: interfaces and simple models."""

from .interfaces import IConfigService, IFileService, IHistoryHook
from .models import (
    Command,
    DocumentState,
    FileReference,
    HistoryAction,
    MemoryBuffer,
    TextBuffer,
)

__all__ = [
    "IConfigService",
    "IFileService",
    "IHistoryHook",
    "Command",
    "DocumentState",
    "FileReference",
    "HistoryAction",
    "MemoryBuffer",
    "TextBuffer",
]
