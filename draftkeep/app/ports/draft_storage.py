"""Draft storage port.

Author: Michael Economou
Date: 2026-10-19
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DraftStoragePort(Protocol):
    """Opaque durable key-value store of strings.

    Implementations signal failures by raising; callers do not retry.
    """

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete key. Removing a missing key is not an error."""
        ...
