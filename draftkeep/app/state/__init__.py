"""Per-session state containers."""

from draftkeep.app.state.session_context import DraftSessionContext

__all__ = ["DraftSessionContext"]
