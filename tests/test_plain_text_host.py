"""
Module: test_plain_text_host.py

Author: Michael Economou
Date: 2026-10-19

Tests for PlainTextEditorHost, including an undoable draft restore.
"""

import pytest
from PyQt5.QtWidgets import QPlainTextEdit

from draftkeep.app.ports import EditorHostPort
from draftkeep.core.autosave_settings import AutosaveSettings
from draftkeep.core.draft_store import DraftStore
from draftkeep.ui.adapters import PlainTextEditorHost


@pytest.fixture
def widget(qtbot):
    text_edit = QPlainTextEdit()
    qtbot.addWidget(text_edit)
    return text_edit


@pytest.fixture
def host(widget):
    return PlainTextEditorHost(widget)


class TestPlainTextEditorHost:
    """Test the QPlainTextEdit adapter."""

    def test_implements_port(self, host):
        assert isinstance(host, EditorHostPort)

    def test_get_content(self, widget, host):
        widget.setPlainText("hello")
        assert host.get_content() == "hello"

    def test_set_content_marks_dirty(self, widget, host):
        host.mark_clean()
        assert not host.is_dirty()

        host.set_content("draft text")

        assert widget.toPlainText() == "draft text"
        assert host.is_dirty()

    def test_transaction_is_one_undo_step(self, widget, host):
        widget.setPlainText("hello")

        with host.transaction():
            host.set_content("first")
            host.set_content("second")

        assert widget.toPlainText() == "second"
        widget.undo()
        assert widget.toPlainText() == "hello"

    def test_transaction_closes_on_error(self, widget, host):
        widget.setPlainText("hello")

        with pytest.raises(RuntimeError), host.transaction():
            host.set_content("partial")
            raise RuntimeError("boom")

        assert widget.toPlainText() == "partial"
        widget.undo()
        assert widget.toPlainText() == "hello"


class TestRestoreIntoPlainTextEdit:
    """Restore a stored draft into a real widget."""

    def test_restore_last_draft_is_undoable(self, widget, host, storage, clock):
        settings = AutosaveSettings(
            prefix="pte-", interval_ms=1000, retention_ms=60_000, root_block=""
        )
        store = DraftStore(storage, host, settings, "pte", clock=clock)

        host.set_content("draft body")
        assert store.snapshot_editor()

        widget.setPlainText("fresh load")
        host.mark_clean()
        store.restore_last_draft()

        assert widget.toPlainText() == "draft body"
        assert storage.get("pte-draft") is None

        widget.undo()
        assert widget.toPlainText() == "fresh load"
