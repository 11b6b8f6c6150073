from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Protocol

from caffeine.domain.models import HistoryAction


class IFileService(Protocol):
    """Read/write whole text files. Failures surface as OSError."""

    def read_text(self, path: Path) -> str: ...
    def write_text(self, path: Path, text: str) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...


class IHistoryHook(Protocol):
    """Notified after a successful open or save."""

    def on_action(self, action: HistoryAction, path: Path, timestamp: datetime) -> None: ...
