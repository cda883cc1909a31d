"""Module: draftkeep.config.autosave

Author: Michael Economou
Date: 2026-10-19

Autosave defaults. Per-editor options override these by name
(see AUTOSAVE_OPTION_* below).
"""

# =====================================
# AUTOSAVE DEFAULTS
# =====================================

# Storage key prefix template; {path} and {id} are substituted per editor
DEFAULT_AUTOSAVE_PREFIX = "draftkeep-autosave-{path}-{id}-"

# Durations accept "<n>s", "<n>m" or plain milliseconds
DEFAULT_AUTOSAVE_INTERVAL = "30s"
DEFAULT_AUTOSAVE_RETENTION = "20m"

DEFAULT_AUTOSAVE_ASK_BEFORE_UNLOAD = True
DEFAULT_AUTOSAVE_RESTORE_WHEN_EMPTY = False

# Element the editor wraps an empty paragraph in
DEFAULT_ROOT_BLOCK = "p"

# Storage key suffixes
DRAFT_KEY_SUFFIX = "draft"
TIME_KEY_SUFFIX = "time"

UNSAVED_CHANGES_MESSAGE = "You have unsaved changes, are you sure you want to navigate away?"
RESTORE_DRAFT_ACTION_TEXT = "Restore last draft"

# =====================================
# OPTION NAMES
# =====================================

AUTOSAVE_OPTION_PREFIX = "autosave_prefix"
AUTOSAVE_OPTION_INTERVAL = "autosave_interval"
AUTOSAVE_OPTION_RETENTION = "autosave_retention"
AUTOSAVE_OPTION_ASK_BEFORE_UNLOAD = "autosave_ask_before_unload"
AUTOSAVE_OPTION_RESTORE_WHEN_EMPTY = "autosave_restore_when_empty"
AUTOSAVE_OPTION_ROOT_BLOCK = "forced_root_block"
