"""Module: exceptions.py

Author: Michael Economou
Date: 2026-10-19

Exceptions raised by draftkeep.
"""


class DraftKeepError(Exception):
    """Base class for draftkeep errors."""


class DraftConfigError(DraftKeepError, ValueError):
    """Raised when autosave options cannot be turned into valid settings."""


class DraftStorageError(DraftKeepError):
    """Raised by storage adapters when a read, write or removal fails."""

    def __init__(self, operation: str, key: str, reason: str):
        self.operation = operation
        self.key = key
        self.reason = reason
        super().__init__(f"Draft storage {operation} failed for '{key}': {reason}")
