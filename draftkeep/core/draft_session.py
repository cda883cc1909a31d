"""Module: draft_session.py

Author: Michael Economou
Date: 2026-10-19

DraftSession wires the autosave pieces for one editor:
- DraftSessionContext (started / closed state)
- DraftStore (draft lifecycle and signals)
- DraftScheduler (periodic snapshots)

Call start() once the editor is initialised and close() when it is torn
down. start() may be called any number of times.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from PyQt5.QtCore import QObject

from draftkeep.app.state import DraftSessionContext
from draftkeep.core.autosave_settings import resolve_autosave_settings
from draftkeep.core.draft_scheduler import DraftScheduler
from draftkeep.core.draft_store import DraftStore
from draftkeep.utils.logging.logger_factory import get_cached_logger

if TYPE_CHECKING:
    from draftkeep.app.ports import DraftStoragePort, EditorHostPort
    from draftkeep.core.autosave_settings import AutosaveSettings

logger = get_cached_logger(__name__)


class DraftSession(QObject):
    """Autosave session bound to one editor's lifetime."""

    def __init__(
        self,
        editor: EditorHostPort,
        storage: DraftStoragePort,
        settings: AutosaveSettings,
        editor_id: str,
        clock: Callable[[], int] | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)

        self.context = DraftSessionContext(editor_id=editor_id, settings=settings)
        self.store = DraftStore(storage, editor, settings, editor_id, clock=clock, parent=self)
        self.scheduler = DraftScheduler(self.store, parent=self)

    @classmethod
    def from_options(
        cls,
        editor: EditorHostPort,
        storage: DraftStoragePort,
        options: Mapping[str, Any] | None,
        editor_id: str,
        document_path: str = "",
        clock: Callable[[], int] | None = None,
        parent: QObject | None = None,
    ) -> DraftSession:
        """Create a session, resolving editor options into settings once."""
        settings = resolve_autosave_settings(options, editor_id, document_path)
        return cls(editor, storage, settings, editor_id, clock=clock, parent=parent)

    @property
    def editor_id(self) -> str:
        return self.context.editor_id

    @property
    def settings(self) -> AutosaveSettings:
        return self.context.settings

    @property
    def editor(self) -> EditorHostPort:
        return self.store.editor

    @property
    def is_closed(self) -> bool:
        return self.context.closed

    def start(self) -> bool:
        """Handle editor initialisation.

        Restores the draft into an empty editor when restore_when_empty is
        set, then arms the periodic store.

        Returns:
            True if the periodic store was armed by this call

        """
        if self.context.closed:
            logger.warning("[DraftSession] start() on closed session '%s'", self.editor_id)
            return False

        if (
            not self.context.started
            and self.settings.restore_when_empty
            and self.store.is_empty()
            and self.store.has_draft()
        ):
            self.store.restore_draft()

        return self.scheduler.arm_periodic_store(self.context)

    def close(self) -> None:
        """Tear the session down and stop its timer."""
        if self.context.closed:
            return

        self.context.closed = True
        self.scheduler.cancel()
        logger.info("[DraftSession] Session '%s' closed", self.editor_id)
