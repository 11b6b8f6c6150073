"""Concrete service implementations."""

from .file_service import FileService
from .history import LoggingHistoryHook

__all__ = ["FileService", "LoggingHistoryHook"]
