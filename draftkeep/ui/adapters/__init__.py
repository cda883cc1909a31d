"""Adapters exposing Qt editor widgets through EditorHostPort."""

from draftkeep.ui.adapters.plain_text_host import PlainTextEditorHost

__all__ = ["PlainTextEditorHost"]
