"""Module: memory_storage.py

Author: Michael Economou
Date: 2026-10-19

Process-local draft storage. Drafts live as long as the process; useful
for headless hosts and tests.
"""

from __future__ import annotations


class MemoryDraftStorage:
    """Dict-backed implementation of DraftStoragePort."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = str(value)

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
