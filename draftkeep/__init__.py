"""draftkeep - local draft persistence for rich content editors.

Author: Michael Economou
Date: 2026-10-19

Periodically snapshots editor content into durable key-value storage,
expires stale snapshots and restores the latest valid one on demand.
"""

__version__ = "1.0.0"
