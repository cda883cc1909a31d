"""Ports - Protocol interfaces for the collaborators draftkeep relies on.

- DraftStoragePort: durable key-value string store
- EditorHostPort: the editor whose content is snapshotted

Author: Michael Economou
Date: 2026-10-19
"""

from draftkeep.app.ports.draft_storage import DraftStoragePort
from draftkeep.app.ports.editor_host import EditorHostPort

__all__ = [
    "DraftStoragePort",
    "EditorHostPort",
]
