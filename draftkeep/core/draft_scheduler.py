"""Module: draft_scheduler.py

Author: Michael Economou
Date: 2026-10-19

Periodic draft snapshots for one editor session.

A single repeating QTimer calls DraftStore.snapshot_editor() every
interval. Arming is idempotent per session: the session context's
started flag absorbs repeated requests, so callers may arm on every
relevant lifecycle event. The timer is owned by the scheduler and is
cancelled when the session closes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from draftkeep.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from draftkeep.app.state import DraftSessionContext
    from draftkeep.core.draft_store import DraftStore

logger = get_cached_logger(__name__)


class DraftScheduler(QObject):
    """Runs the periodic draft store for one session."""

    # Emitted when a tick raised (error message); the timer keeps running
    tick_failed = pyqtSignal(str)

    def __init__(self, store: DraftStore, parent: QObject | None = None):
        super().__init__(parent)

        self._store = store
        self._context: DraftSessionContext | None = None
        self._timer: QTimer | None = None

    def arm_periodic_store(self, context: DraftSessionContext) -> bool:
        """Start the periodic store unless it already runs for this session.

        Args:
            context: Session state; its started flag is set on success

        Returns:
            True if a timer was started, False if the request was absorbed

        """
        if context.started:
            logger.debug(
                "[DraftScheduler] Already armed for '%s'",
                context.editor_id,
                extra={"dev_only": True},
            )
            return False

        if self._timer is not None:
            logger.warning(
                "[DraftScheduler] Timer already running for '%s', not arming '%s'",
                self._context.editor_id if self._context is not None else "",
                context.editor_id,
            )
            return False

        if context.closed:
            logger.warning(
                "[DraftScheduler] Session '%s' is closed, not arming", context.editor_id
            )
            return False

        interval = context.settings.interval_ms

        timer = QTimer(self)
        timer.setInterval(interval)
        timer.timeout.connect(self._perform_periodic_store)

        self._context = context
        self._timer = timer
        timer.start()
        context.started = True

        logger.info(
            "[DraftScheduler] Periodic draft store started for '%s' (every %dms)",
            context.editor_id,
            interval,
        )
        return True

    def cancel(self) -> bool:
        """Stop and release the timer.

        Returns:
            True if a timer was running

        """
        if self._timer is None:
            return False

        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

        if self._context is not None:
            logger.info(
                "[DraftScheduler] Periodic draft store stopped for '%s'",
                self._context.editor_id,
            )
        return True

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _perform_periodic_store(self) -> None:
        """Store a snapshot (called by timer)."""
        context = self._context
        if context is None or not context.is_live:
            return

        try:
            self._store.snapshot_editor()
        except Exception as e:
            error_msg = f"[DraftScheduler] Periodic store failed for '{context.editor_id}': {e!s}"
            logger.exception(error_msg)
            self.tick_failed.emit(error_msg)
