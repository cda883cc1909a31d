"""Module: __init__.py

Author: Michael Economou
Date: 2026-10-19

Core package: emptiness check, draft lifecycle, periodic scheduling and
session wiring.
"""

from draftkeep.core.autosave_settings import (
    AutosaveSettings,
    parse_duration,
    resolve_autosave_settings,
)
from draftkeep.core.draft_scheduler import DraftScheduler
from draftkeep.core.draft_session import DraftSession
from draftkeep.core.draft_store import DraftStore
from draftkeep.core.emptiness import is_empty_content
from draftkeep.core.exceptions import DraftConfigError, DraftKeepError, DraftStorageError
from draftkeep.core.unload_guard import check_before_unload

__all__ = [
    "AutosaveSettings",
    "DraftConfigError",
    "DraftKeepError",
    "DraftScheduler",
    "DraftSession",
    "DraftStorageError",
    "DraftStore",
    "check_before_unload",
    "is_empty_content",
    "parse_duration",
    "resolve_autosave_settings",
]
