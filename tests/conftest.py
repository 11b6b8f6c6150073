from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from caffeine.services.config.ini_config_service import IniConfigService  # noqa: E402
from caffeine.services.file_service import FileService  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# --- Fake UI ports ---


class FakeFileDialogs:
    """Scripted IFileDialogService: returns queued answers and records each prompt."""

    def __init__(self) -> None:
        self.open_answers: list[Path | None] = []
        self.save_answers: list[Path | None] = []
        self.calls: list[tuple[str, str, str]] = []

    def get_open_file(self, parent: Any, caption: str, start_dir: str | None, filter_str: str):
        self.calls.append(("open", caption, filter_str))
        return self.open_answers.pop(0) if self.open_answers else None

    def get_save_file(self, parent: Any, caption: str, start_path: str | None, filter_str: str):
        self.calls.append(("save", caption, filter_str))
        return self.save_answers.pop(0) if self.save_answers else None


class FakeMessages:
    def __init__(self) -> None:
        self.shown: list[tuple[str, str, str]] = []

    def info(self, parent: Any, title: str, text: str) -> None:
        self.shown.append(("info", title, text))

    def error(self, parent: Any, title: str, text: str) -> None:
        self.shown.append(("error", title, text))

    @property
    def errors(self) -> list[tuple[str, str, str]]:
        return [m for m in self.shown if m[0] == "error"]


# --- Other common fixtures ---


@pytest.fixture()
def file_dialogs() -> FakeFileDialogs:
    return FakeFileDialogs()


@pytest.fixture()
def messages() -> FakeMessages:
    return FakeMessages()


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def utf8_locale(monkeypatch):
    """Pin the 'platform default' encoding so results don't depend on the host locale."""
    monkeypatch.setattr("caffeine.services.file_service.default_encoding", lambda: "utf-8")


@pytest.fixture()
def isolated_config(monkeypatch, tmp_path: Path) -> IniConfigService:
    """Config that ignores any real user config dir."""
    monkeypatch.setattr(
        "caffeine.services.config.ini_config_service.user_config_dir",
        lambda appname: str(tmp_path / "usercfg"),
        raising=False,
    )
    return IniConfigService(project_root=tmp_path / "repo")
