"""Module: restore_draft_action.py

Author: Michael Economou
Date: 2026-10-19

"Restore last draft" menu/toolbar action. Triggering it restores the
draft of the bound store; it is enabled only while a valid draft exists
and re-checks on every draft signal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtWidgets import QAction

from draftkeep.config import RESTORE_DRAFT_ACTION_TEXT
from draftkeep.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from PyQt5.QtCore import QObject

    from draftkeep.core.draft_store import DraftStore

logger = get_cached_logger(__name__)


class RestoreDraftAction(QAction):
    """QAction bound to one DraftStore."""

    def __init__(self, store: DraftStore, parent: QObject | None = None):
        super().__init__(RESTORE_DRAFT_ACTION_TEXT, parent)

        self._store = store

        self.triggered.connect(self._on_triggered)
        store.draft_stored.connect(self.refresh_state)
        store.draft_removed.connect(self.refresh_state)
        store.draft_restored.connect(self.refresh_state)

        self.refresh_state()

    def refresh_state(self, _editor_id: str = "") -> None:
        """Enable the action only while a non-expired draft exists."""
        self.setEnabled(self._store.has_draft())

    def _on_triggered(self, _checked: bool = False) -> None:
        logger.debug(
            "[RestoreDraftAction] Triggered for '%s'",
            self._store.editor_id,
            extra={"dev_only": True},
        )
        self._store.restore_last_draft()
