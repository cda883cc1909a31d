"""Draft storage adapters.

Author: Michael Economou
Date: 2026-10-19
"""

from draftkeep.infra.storage.memory_storage import MemoryDraftStorage
from draftkeep.infra.storage.qsettings_storage import QSettingsDraftStorage

__all__ = ["MemoryDraftStorage", "QSettingsDraftStorage"]
