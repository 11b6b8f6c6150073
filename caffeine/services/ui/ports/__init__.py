from __future__ import annotations

from .dialogs import IFileDialogService
from .messages import IMessageService, Severity

__all__ = [
    "IFileDialogService",
    "IMessageService",
    "Severity",
]
