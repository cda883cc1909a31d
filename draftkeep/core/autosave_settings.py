"""Module: autosave_settings.py

Author: Michael Economou
Date: 2026-10-19

Immutable autosave settings for one editor, resolved once from plain
option mappings when the session is created.

Durations follow the "<n>s" / "<n>m" / "<n>" (milliseconds) convention:
    parse_duration("30s") -> 30000
    parse_duration("20m") -> 1200000
    parse_duration(1500)  -> 1500
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from draftkeep.config import (
    AUTOSAVE_OPTION_ASK_BEFORE_UNLOAD,
    AUTOSAVE_OPTION_INTERVAL,
    AUTOSAVE_OPTION_PREFIX,
    AUTOSAVE_OPTION_RESTORE_WHEN_EMPTY,
    AUTOSAVE_OPTION_RETENTION,
    AUTOSAVE_OPTION_ROOT_BLOCK,
    DEFAULT_AUTOSAVE_ASK_BEFORE_UNLOAD,
    DEFAULT_AUTOSAVE_INTERVAL,
    DEFAULT_AUTOSAVE_PREFIX,
    DEFAULT_AUTOSAVE_RESTORE_WHEN_EMPTY,
    DEFAULT_AUTOSAVE_RETENTION,
    DEFAULT_ROOT_BLOCK,
    DRAFT_KEY_SUFFIX,
    TIME_KEY_SUFFIX,
)
from draftkeep.core.exceptions import DraftConfigError
from draftkeep.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

_DURATION_PATTERN = re.compile(r"^(\d+)([ms]?)$")
_DURATION_MULTIPLIERS = {"": 1, "s": 1000, "m": 60_000}


def parse_duration(value: str | int, option: str = "duration") -> int:
    """Convert a duration option to milliseconds.

    Args:
        value: int milliseconds, or a string like "30s", "20m", "1500"
        option: Option name used in the error message

    Returns:
        Duration in milliseconds

    Raises:
        DraftConfigError: If the value is not a recognised duration

    """
    if isinstance(value, bool):
        raise DraftConfigError(f"Invalid {option}: {value!r}")
    if isinstance(value, int):
        return value

    match = _DURATION_PATTERN.match(str(value).strip())
    if match is None:
        raise DraftConfigError(f"Invalid {option}: {value!r}")

    amount, unit = match.groups()
    return int(amount) * _DURATION_MULTIPLIERS[unit]


@dataclass(frozen=True)
class AutosaveSettings:
    """Resolved, validated autosave settings for one editor."""

    prefix: str
    interval_ms: int
    retention_ms: int
    root_block: str = DEFAULT_ROOT_BLOCK
    ask_before_unload: bool = DEFAULT_AUTOSAVE_ASK_BEFORE_UNLOAD
    restore_when_empty: bool = DEFAULT_AUTOSAVE_RESTORE_WHEN_EMPTY

    def __post_init__(self) -> None:
        if not self.prefix:
            raise DraftConfigError("Autosave prefix must not be empty")
        if self.interval_ms <= 0:
            raise DraftConfigError(f"Autosave interval must be positive, got {self.interval_ms}")
        if self.retention_ms <= 0:
            raise DraftConfigError(
                f"Autosave retention must be positive, got {self.retention_ms}"
            )

    @property
    def draft_key(self) -> str:
        return self.prefix + DRAFT_KEY_SUFFIX

    @property
    def time_key(self) -> str:
        return self.prefix + TIME_KEY_SUFFIX


def resolve_autosave_settings(
    options: Mapping[str, Any] | None,
    editor_id: str,
    document_path: str = "",
) -> AutosaveSettings:
    """Build AutosaveSettings from editor options.

    Missing options fall back to the defaults in draftkeep.config. The
    prefix template may use {path} (document_path) and {id} (editor_id).

    Args:
        options: Editor options keyed by the AUTOSAVE_OPTION_* names
        editor_id: Identity of the editor instance
        document_path: Location of the edited document, if any

    Returns:
        AutosaveSettings

    Raises:
        DraftConfigError: If any option is invalid

    """
    options = options or {}

    template = str(options.get(AUTOSAVE_OPTION_PREFIX, DEFAULT_AUTOSAVE_PREFIX))
    prefix = template.replace("{path}", document_path).replace("{id}", editor_id)

    root_block = options.get(AUTOSAVE_OPTION_ROOT_BLOCK, DEFAULT_ROOT_BLOCK)

    settings = AutosaveSettings(
        prefix=prefix,
        interval_ms=parse_duration(
            options.get(AUTOSAVE_OPTION_INTERVAL, DEFAULT_AUTOSAVE_INTERVAL),
            AUTOSAVE_OPTION_INTERVAL,
        ),
        retention_ms=parse_duration(
            options.get(AUTOSAVE_OPTION_RETENTION, DEFAULT_AUTOSAVE_RETENTION),
            AUTOSAVE_OPTION_RETENTION,
        ),
        root_block=str(root_block) if root_block else "",
        ask_before_unload=bool(
            options.get(AUTOSAVE_OPTION_ASK_BEFORE_UNLOAD, DEFAULT_AUTOSAVE_ASK_BEFORE_UNLOAD)
        ),
        restore_when_empty=bool(
            options.get(AUTOSAVE_OPTION_RESTORE_WHEN_EMPTY, DEFAULT_AUTOSAVE_RESTORE_WHEN_EMPTY)
        ),
    )

    logger.debug(
        "[AutosaveSettings] Resolved for '%s': prefix=%s interval=%dms retention=%dms",
        editor_id,
        settings.prefix,
        settings.interval_ms,
        settings.retention_ms,
        extra={"dev_only": True},
    )
    return settings
