"""Module: qsettings_storage.py

Author: Michael Economou
Date: 2026-10-19

Durable draft storage on top of QSettings.

Every write and removal is synced to the backing store immediately so a
crash cannot lose a snapshot that was reported as stored. A sync that
leaves QSettings in an error state raises DraftStorageError.
"""

from __future__ import annotations

from pathlib import Path

from PyQt5.QtCore import QSettings

from draftkeep.config import APP_NAME, APP_ORGANIZATION
from draftkeep.core.exceptions import DraftStorageError
from draftkeep.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_STATUS_NAMES = {
    QSettings.AccessError: "access error",
    QSettings.FormatError: "format error",
}


class QSettingsDraftStorage:
    """DraftStoragePort implementation backed by QSettings."""

    def __init__(self, settings: QSettings | None = None):
        """Initialize storage.

        Args:
            settings: QSettings to use; defaults to the application's native
                settings store

        """
        if settings is None:
            settings = QSettings(APP_ORGANIZATION, APP_NAME)
        self._settings = settings
        logger.debug(
            "[QSettingsDraftStorage] Using %s", self._settings.fileName(), extra={"dev_only": True}
        )

    @classmethod
    def from_ini_file(cls, path: str | Path) -> QSettingsDraftStorage:
        """Create storage that persists to an INI file."""
        return cls(QSettings(str(path), QSettings.IniFormat))

    @property
    def file_name(self) -> str:
        return self._settings.fileName()

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, str(value))
        self._sync("write", key)

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._sync("remove", key)

    def _sync(self, operation: str, key: str) -> None:
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.NoError:
            reason = _STATUS_NAMES.get(status, f"status {int(status)}")
            logger.error(
                "[QSettingsDraftStorage] %s of '%s' failed: %s", operation, key, reason
            )
            raise DraftStorageError(operation, key, reason)
