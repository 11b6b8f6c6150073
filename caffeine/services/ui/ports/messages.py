from __future__ import annotations

from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class Severity(Enum):
    """How an alert is presented (maps to QMessageBox icons)."""

    INFO = auto()
    ERROR = auto()


@runtime_checkable
class IMessageService(Protocol):
    """
    Abstract UI port for modal message boxes. Each call returns only after the
    user has dismissed the box.
    """

    def info(self, parent: Any | None, title: str, text: str) -> None: ...
    def error(self, parent: Any | None, title: str, text: str) -> None: ...
