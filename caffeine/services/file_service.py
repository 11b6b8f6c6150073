from __future__ import annotations

import locale
import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from caffeine.domain.interfaces import IFileService

logger = logging.getLogger(__name__)


def default_encoding() -> str:
    return locale.getpreferredencoding(False)


class FileService(IFileService):
    """Whole-file text reads/writes using the platform default encoding."""

    def read_text(self, path: Path) -> str:
        encoding = default_encoding()
        logger.debug("Reading %s (%s)", path, encoding)
        data = path.read_bytes()
        try:
            # decode bytes directly so line endings come back untouched
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise OSError(f"Cannot decode {path} as {encoding}: {e}") from e

    def write_text(self, path: Path, text: str) -> None:
        encoding = default_encoding()
        logger.debug("Writing %s (%s)", path, encoding)
        try:
            data = text.encode(encoding)
        except UnicodeEncodeError as e:
            raise OSError(f"Cannot encode text as {encoding}: {e}") from e

        # QSaveFile leaves the existing file alone unless commit() succeeds
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(data)
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
