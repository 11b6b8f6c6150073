from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from caffeine.domain.interfaces import IHistoryHook
from caffeine.domain.models import HistoryAction

logger = logging.getLogger(__name__)


class LoggingHistoryHook(IHistoryHook):
    """Default history hook: records open/save events in the application log only."""

    def on_action(self, action: HistoryAction, path: Path, timestamp: datetime) -> None:
        logger.info(
            "history %s %s at %s",
            action.value,
            path,
            timestamp.isoformat(timespec="seconds"),
        )
