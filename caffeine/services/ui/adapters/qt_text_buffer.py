from __future__ import annotations

from PyQt6.QtWidgets import QPlainTextEdit

PARAGRAPH_SEPARATOR = "\u2029"


class QtTextBufferAdapter:
    """
    TextBuffer over a QPlainTextEdit that hands back the file's text unchanged.

    ``toPlainText()`` on the widget turns NBSP into spaces and every block
    break into ``\\n``. This adapter reads ``toRawText()`` instead, returns the
    loaded text verbatim while the document is untouched, and otherwise
    rebuilds line breaks in the newline style of the loaded text.
    """

    def __init__(self, edit: QPlainTextEdit) -> None:
        self._e = edit
        self._loaded = ""
        self._shown = ""
        self.newline = "\n"

    def setPlainText(self, text: str) -> None:
        self.newline = "\r\n" if "\r\n" in text else "\n"
        self._e.setPlainText(text)
        self._loaded = text
        self._shown = self._raw()

    def toPlainText(self) -> str:
        raw = self._raw()
        if raw == self._shown:
            return self._loaded
        return raw.replace(PARAGRAPH_SEPARATOR, self.newline)

    def _raw(self) -> str:
        return self._e.document().toRawText()
