"""Module: draftkeep.config

Author: Michael Economou
Date: 2026-10-19

Configuration package for draftkeep.

This package organizes configuration into logical modules:
- app: Application info, logging
- autosave: Draft autosave defaults and option names

All settings are re-exported from this module:
    from draftkeep.config import APP_NAME, DEFAULT_AUTOSAVE_INTERVAL
"""

from draftkeep.config.app import *  # noqa: F401, F403
from draftkeep.config.autosave import *  # noqa: F401, F403
