"""Module: session_context.py - Qt-free per-editor session state.

Author: Michael Economou
Date: 2026-10-19

DraftSessionContext holds the little mutable state one editor session
needs: whether the periodic store has been armed and whether the session
has been torn down. One instance per editor; never shared, never global,
so several editors in one process stay independent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from draftkeep.core.autosave_settings import AutosaveSettings


@dataclass
class DraftSessionContext:
    """State of one editor session.

    Attributes:
        editor_id: Identity carried by every draft event
        settings: Autosave settings resolved once for this editor
        started: Set when the periodic store is armed; never reset
        closed: Set on teardown; ticks are skipped afterwards

    """

    editor_id: str
    settings: AutosaveSettings
    started: bool = False
    closed: bool = False

    @property
    def is_live(self) -> bool:
        return not self.closed
