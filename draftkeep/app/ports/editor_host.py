"""Editor host port.

Author: Michael Economou
Date: 2026-10-19
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


@runtime_checkable
class EditorHostPort(Protocol):
    """Capabilities draftkeep needs from the host editor."""

    def get_content(self) -> str:
        """Return the raw serialized content without firing editor events."""
        ...

    def set_content(self, content: str) -> None:
        """Replace the whole content with raw serialized content."""
        ...

    def is_dirty(self) -> bool:
        """Return True when there are changes since the last clean state."""
        ...

    def transaction(self) -> AbstractContextManager[None]:
        """Group the edits made inside the block into a single undo step."""
        ...

    def focus(self) -> None:
        """Move input focus to the editor."""
        ...
