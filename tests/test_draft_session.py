"""
Module: test_draft_session.py

Author: Michael Economou
Date: 2026-10-19

Tests for DraftSession wiring, restore-when-empty, teardown, and the
end-to-end autosave scenario.
"""

import pytest
from PyQt5.QtCore import QTimer

from draftkeep.core.autosave_settings import AutosaveSettings
from draftkeep.core.draft_session import DraftSession
from tests.mocks import EDITOR_ID, FakeEditorHost


@pytest.fixture
def session(qapp, editor, storage, settings, clock):
    _ = qapp
    draft_session = DraftSession(editor, storage, settings, EDITOR_ID, clock=clock)
    yield draft_session
    draft_session.close()


class TestSessionStart:
    """Test start() on editor initialisation."""

    def test_start_arms_scheduler(self, session):
        assert session.start()

        assert session.context.started
        assert session.scheduler.is_active()

    def test_repeated_start_keeps_single_timer(self, session):
        assert [session.start() for _ in range(3)] == [True, False, False]
        assert len(session.scheduler.findChildren(QTimer)) == 1

    def test_sessions_do_not_share_started_flag(self, qapp, storage, settings, clock):
        _ = qapp
        first = DraftSession(FakeEditorHost(), storage, settings, "a", clock=clock)
        second = DraftSession(FakeEditorHost(), storage, settings, "b", clock=clock)

        assert first.start()
        assert second.start()

        first.close()
        second.close()

    def test_start_after_close(self, session):
        session.close()

        assert not session.start()
        assert not session.context.started


class TestRestoreWhenEmpty:
    """Test restoring the draft into an empty editor on start."""

    def _session(self, editor, storage, clock, restore_when_empty):
        settings = AutosaveSettings(
            prefix="test-",
            interval_ms=1000,
            retention_ms=60_000,
            restore_when_empty=restore_when_empty,
        )
        return DraftSession(editor, storage, settings, EDITOR_ID, clock=clock)

    def test_restores_into_empty_editor(self, qapp, editor, storage, clock):
        _ = qapp
        storage.set("test-draft", "<p>draft</p>")
        storage.set("test-time", str(clock.now))
        editor.content = "<p>&nbsp;</p>"
        session = self._session(editor, storage, clock, restore_when_empty=True)
        restored = []
        session.store.draft_restored.connect(restored.append)

        session.start()

        assert editor.content == "<p>draft</p>"
        assert restored == [EDITOR_ID]
        assert storage.get("test-draft") == "<p>draft</p>"
        session.close()

    def test_keeps_non_empty_editor(self, qapp, editor, storage, clock):
        _ = qapp
        storage.set("test-draft", "<p>draft</p>")
        storage.set("test-time", str(clock.now))
        editor.content = "<p>loaded</p>"
        session = self._session(editor, storage, clock, restore_when_empty=True)

        session.start()

        assert editor.content == "<p>loaded</p>"
        session.close()

    def test_disabled_by_default(self, session, editor, storage, clock):
        storage.set("test-draft", "<p>draft</p>")
        storage.set("test-time", str(clock.now))

        session.start()

        assert editor.set_content_calls == []

    def test_expired_draft_not_restored(self, qapp, editor, storage, clock):
        _ = qapp
        storage.set("test-draft", "<p>draft</p>")
        storage.set("test-time", str(clock.now))
        clock.advance(60_001)
        session = self._session(editor, storage, clock, restore_when_empty=True)

        session.start()

        assert editor.set_content_calls == []
        assert len(storage) == 0
        session.close()


class TestSessionClose:
    """Test deterministic teardown."""

    def test_close_stops_timer(self, session):
        session.start()
        session.close()

        assert session.is_closed
        assert not session.scheduler.is_active()

    def test_close_twice(self, session):
        session.start()
        session.close()
        session.close()

        assert session.is_closed

    def test_close_keeps_draft(self, session, editor, storage):
        session.start()
        editor.type_text("keep me")
        session.scheduler._perform_periodic_store()
        session.close()

        assert storage.get("test-draft") == "keep me"


class TestFromOptions:
    """Test building a session from editor options."""

    def test_resolves_settings_once(self, qapp, editor, storage):
        _ = qapp
        session = DraftSession.from_options(
            editor,
            storage,
            {"autosave_interval": "5s", "autosave_retention": "1m"},
            "body",
            document_path="/notes/today",
        )

        assert session.editor_id == "body"
        assert session.settings.prefix == "draftkeep-autosave-/notes/today-body-"
        assert session.settings.interval_ms == 5000
        assert session.store.settings is session.settings
        session.close()


class TestAutosaveScenario:
    """Empty editor, typing, periodic store, then restore after expiry."""

    def test_full_scenario(self, qapp, storage, clock):
        _ = qapp
        editor = FakeEditorHost(content='<p><br data-mce-bogus="1"></p>')
        settings = AutosaveSettings(prefix="app-", interval_ms=10_000, retention_ms=1_800_000)
        session = DraftSession(editor, storage, settings, EDITOR_ID, clock=clock)
        events = []
        session.store.draft_stored.connect(lambda _id: events.append("stored"))
        session.store.draft_removed.connect(lambda _id: events.append("removed"))
        session.store.draft_restored.connect(lambda _id: events.append("restored"))

        session.start()
        assert session.scheduler.is_active()

        # Editor loaded empty: the first tick writes nothing
        clock.advance(10_000)
        session.scheduler._perform_periodic_store()
        assert storage.get("app-draft") is None

        # User types: the next tick stores the draft
        editor.type_text("hello")
        clock.advance(10_000)
        session.scheduler._perform_periodic_store()
        assert storage.get("app-draft") == "hello"
        assert storage.get("app-time") == str(clock.now)
        assert session.store.has_draft()

        # 30 minutes + 1ms later the draft is expired
        clock.advance(1_800_001)
        session.store.restore_last_draft()

        assert editor.set_content_calls == []
        assert editor.content == "hello"
        assert storage.get("app-draft") is None
        assert storage.get("app-time") is None
        assert editor.focus_calls == 1
        assert events == ["stored", "removed"]

        session.close()
        assert not session.scheduler.is_active()
