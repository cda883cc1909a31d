"""Module: draft_store.py

Author: Michael Economou
Date: 2026-10-19

This module keeps one editor's draft in durable key-value storage.
A draft is two string values written together: the raw content under
"<prefix>draft" and the write time in epoch milliseconds under
"<prefix>time". Nothing is cached in memory; storage is the only owner.

Features:
- Store a snapshot only when the content is non-empty and the editor is dirty
- Lazy expiry: a draft older than the retention window is removed the next
  time its validity is checked
- Restore the last draft as a single undoable edit
- Qt signals for stored / removed / restored, carrying the editor id

Storage failures are not caught here; they reach the caller unchanged.
A failed timestamp write removes the half-written draft before re-raising.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from PyQt5.QtCore import QObject, pyqtSignal

from draftkeep.core.emptiness import is_empty_content
from draftkeep.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from draftkeep.app.ports import DraftStoragePort, EditorHostPort
    from draftkeep.core.autosave_settings import AutosaveSettings

logger = get_cached_logger(__name__)


def current_time_millis() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


class DraftStore(QObject):
    """Stores, validates, removes and restores the draft of one editor.

    Signals:
        draft_stored: A snapshot was written (editor_id)
        draft_removed: The draft was removed with notification (editor_id)
        draft_restored: Draft content was applied to the editor (editor_id)
    """

    draft_stored = pyqtSignal(str)
    draft_removed = pyqtSignal(str)
    draft_restored = pyqtSignal(str)

    def __init__(
        self,
        storage: DraftStoragePort,
        editor: EditorHostPort,
        settings: AutosaveSettings,
        editor_id: str,
        clock: Callable[[], int] | None = None,
        parent: QObject | None = None,
    ):
        """Initialize the draft store.

        Args:
            storage: Durable key-value store shared by all editors
            editor: Host editor providing and receiving content
            settings: Resolved autosave settings (prefix, retention, root block)
            editor_id: Identity emitted with every signal
            clock: Returns the current time in epoch milliseconds
            parent: Optional Qt parent

        """
        super().__init__(parent)

        self._storage = storage
        self._editor = editor
        self._settings = settings
        self._clock = clock or current_time_millis
        self.editor_id = editor_id

    @property
    def settings(self) -> AutosaveSettings:
        return self._settings

    @property
    def editor(self) -> EditorHostPort:
        return self._editor

    def is_empty(self, content: str | None = None) -> bool:
        """Check content (or the editor's current content) for emptiness."""
        if content is None:
            content = self._editor.get_content()
        return is_empty_content(content, self._settings.root_block)

    def store_draft(self, content: str, dirty: bool) -> bool:
        """Write content as the current draft.

        Empty content or a clean editor never creates or overwrites a draft.

        Args:
            content: Raw serialized editor content
            dirty: Whether the editor has unsaved changes

        Returns:
            True if the draft was written, False if skipped

        """
        if not dirty or self.is_empty(content):
            return False

        timestamp = self._clock()
        self._storage.set(self._settings.draft_key, content)
        try:
            self._storage.set(self._settings.time_key, str(timestamp))
        except Exception:
            # New content must never sit next to an older timestamp
            logger.warning(
                "[DraftStore] Timestamp write failed for '%s', discarding partial draft",
                self.editor_id,
            )
            self.remove_draft(notify=False)
            raise

        logger.debug(
            "[DraftStore] Draft stored for '%s' (%d chars at %d)",
            self.editor_id,
            len(content),
            timestamp,
            extra={"dev_only": True},
        )
        self.draft_stored.emit(self.editor_id)
        return True

    def snapshot_editor(self) -> bool:
        """Store the editor's current content if it is worth keeping."""
        return self.store_draft(self._editor.get_content(), self._editor.is_dirty())

    def has_draft(self) -> bool:
        """Check whether a non-expired draft exists.

        A missing or unparseable timestamp counts as 0, so it is always
        expired. An expired draft is removed silently before returning.

        Returns:
            True if the draft is within the retention window

        """
        raw_time = self._storage.get(self._settings.time_key)
        try:
            stored_at = int(raw_time)
        except (TypeError, ValueError):
            stored_at = 0

        age = self._clock() - stored_at
        if age > self._settings.retention_ms:
            if raw_time is not None:
                logger.info(
                    "[DraftStore] Draft for '%s' expired (age %dms > %dms)",
                    self.editor_id,
                    age,
                    self._settings.retention_ms,
                )
            self.remove_draft(notify=False)
            return False

        return True

    def remove_draft(self, notify: bool = True) -> None:
        """Delete the draft keys. Removing a missing draft is a no-op.

        Args:
            notify: Emit draft_removed; composite operations that fire their
                own event pass False

        """
        self._storage.remove(self._settings.draft_key)
        self._storage.remove(self._settings.time_key)

        if notify:
            logger.debug(
                "[DraftStore] Draft removed for '%s'", self.editor_id, extra={"dev_only": True}
            )
            self.draft_removed.emit(self.editor_id)

    def restore_draft(self) -> bool:
        """Apply the stored draft to the editor if it is still valid.

        Returns:
            True if content was restored

        """
        if not self.has_draft():
            return False

        content = self._storage.get(self._settings.draft_key)
        if content is None:
            logger.warning(
                "[DraftStore] Timestamp without draft content for '%s', nothing restored",
                self.editor_id,
            )
            return False

        self._editor.set_content(content)
        logger.info("[DraftStore] Draft restored for '%s'", self.editor_id)
        self.draft_restored.emit(self.editor_id)
        return True

    def restore_last_draft(self) -> None:
        """Restore the last draft as one undoable edit, then discard it.

        The removal always runs and always emits draft_removed, even when
        there was nothing to restore. Focus moves to the editor afterwards.
        """
        with self._editor.transaction():
            self.restore_draft()
            self.remove_draft()

        self._editor.focus()
