"""Module: plain_text_host.py

Author: Michael Economou
Date: 2026-10-19

EditorHostPort adapter for QPlainTextEdit.

Content is the widget's plain text and the dirty flag is the document's
modified flag. Content replacement goes through a QTextCursor so it stays
on the undo stack; transaction() groups everything inside it into one
undo step.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QPlainTextEdit


class PlainTextEditorHost:
    """Expose a QPlainTextEdit as a draft host editor."""

    def __init__(self, widget: QPlainTextEdit):
        self._widget = widget

    @property
    def widget(self) -> QPlainTextEdit:
        return self._widget

    def get_content(self) -> str:
        return self._widget.toPlainText()

    def set_content(self, content: str) -> None:
        cursor = QTextCursor(self._widget.document())
        cursor.select(QTextCursor.Document)
        cursor.insertText(content)

    def is_dirty(self) -> bool:
        return self._widget.document().isModified()

    def mark_clean(self) -> None:
        """Reset the dirty flag, e.g. after the host saved the document."""
        self._widget.document().setModified(False)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        cursor = QTextCursor(self._widget.document())
        cursor.beginEditBlock()
        try:
            yield
        finally:
            cursor.endEditBlock()

    def focus(self) -> None:
        self._widget.setFocus()
