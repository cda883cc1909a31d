"""
Module: test_restore_draft_action.py

Author: Michael Economou
Date: 2026-10-19

Tests for RestoreDraftAction enable state and triggering.
"""

import pytest

from draftkeep.config import RESTORE_DRAFT_ACTION_TEXT
from draftkeep.ui.restore_draft_action import RestoreDraftAction


@pytest.fixture
def action(store):
    return RestoreDraftAction(store)


class TestRestoreDraftAction:
    """Test the restore action bound to a DraftStore."""

    def test_text(self, action):
        assert action.text() == RESTORE_DRAFT_ACTION_TEXT

    def test_disabled_without_draft(self, action):
        assert not action.isEnabled()

    def test_enabled_after_store(self, action, store):
        store.store_draft("hello", dirty=True)
        assert action.isEnabled()

    def test_disabled_after_remove(self, action, store):
        store.store_draft("hello", dirty=True)
        store.remove_draft()
        assert not action.isEnabled()

    def test_refresh_drops_expired_draft(self, action, store, storage, clock):
        store.store_draft("hello", dirty=True)
        clock.advance(60_001)

        action.refresh_state()

        assert not action.isEnabled()
        assert len(storage) == 0

    def test_trigger_restores_last_draft(self, qtbot, action, store, editor, storage):
        store.store_draft("saved", dirty=True)
        editor.content = "current"

        with qtbot.waitSignal(store.draft_restored, timeout=1000):
            action.trigger()

        assert editor.content == "saved"
        assert editor.focus_calls == 1
        assert len(storage) == 0
        assert not action.isEnabled()

    def test_trigger_without_draft(self, qtbot, action, store, editor):
        with qtbot.assertNotEmitted(store.draft_restored):
            action.trigger()

        assert editor.set_content_calls == []
        assert editor.focus_calls == 1
