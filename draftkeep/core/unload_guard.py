"""Module: unload_guard.py

Author: Michael Economou
Date: 2026-10-19

Last chance handling before the host application closes its editors:
every open session snapshots its editor, and a warning message is
returned if any editor still has unsaved changes and asks to be warned.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from draftkeep.config import UNSAVED_CHANGES_MESSAGE
from draftkeep.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from draftkeep.core.draft_session import DraftSession

logger = get_cached_logger(__name__)


def check_before_unload(sessions: Iterable[DraftSession]) -> str | None:
    """Snapshot every open session and report unsaved changes.

    Args:
        sessions: Sessions of the editors about to be closed

    Returns:
        The unsaved changes message, or None if closing needs no confirmation

    """
    message = None

    for session in sessions:
        if session.is_closed:
            continue

        session.store.snapshot_editor()

        if message is None and session.settings.ask_before_unload and session.editor.is_dirty():
            logger.info("[UnloadGuard] Unsaved changes in '%s'", session.editor_id)
            message = UNSAVED_CHANGES_MESSAGE

    return message
