from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from caffeine.domain.interfaces import IConfigService
from caffeine.services.config.ini_config_service import IniConfigService
from caffeine.utils.constants import (
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    MIN_WINDOW_SIZE,
)


def _project_root_fallback() -> Path:
    """
    Best-effort project root resolution that also works in PyInstaller:
      - PyInstaller bundles expose sys._MEIPASS as bundle root
      - dev mode walks up from this file
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)

    # caffeine/services/config/editor_settings.py -> parents[3] is the repo root
    return Path(__file__).resolve().parents[3]


def _log_level(name: str | None) -> int:
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True)
class EditorSettings:
    """Typed view of the [window], [editor] and [logging] config sections."""

    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    wrap: bool = True
    log_level: int = logging.WARNING

    @classmethod
    def from_config(cls, cfg: IConfigService) -> EditorSettings:
        width = cfg.get_int("window", "width", DEFAULT_WINDOW_WIDTH)
        height = cfg.get_int("window", "height", DEFAULT_WINDOW_HEIGHT)
        if width is None:
            width = DEFAULT_WINDOW_WIDTH
        if height is None:
            height = DEFAULT_WINDOW_HEIGHT
        wrap = cfg.get_bool("editor", "wrap", True)
        return cls(
            width=max(MIN_WINDOW_SIZE, width),
            height=max(MIN_WINDOW_SIZE, height),
            wrap=True if wrap is None else wrap,
            log_level=_log_level(cfg.get("logging", "level", "WARNING")),
        )


def build_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> IniConfigService:
    return IniConfigService(
        explicit_path=explicit_ini, project_root=project_root or _project_root_fallback()
    )
