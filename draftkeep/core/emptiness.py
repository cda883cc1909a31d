"""Module: emptiness.py

Author: Michael Economou
Date: 2026-10-19

Emptiness check for serialized editor content.

A freshly loaded editor with no user input still serializes to markup
such as "<p>&nbsp;</p>" or "<br>". Such content is treated as empty so it
is never stored as a draft and never counts as something to restore.
"""

from __future__ import annotations

import re
from functools import lru_cache

from draftkeep.config import DEFAULT_ROOT_BLOCK

# Inner content of an empty root block: nbsp (literal or entity), space, tab, <br>
_BLANK_INNER = r"(?:\u00a0|&nbsp;|[ \t]|<br(?:\s[^>]*)?/?>)*"
_LINE_BREAK = r"<br\s*/?>"


@lru_cache(maxsize=16)
def _empty_pattern(root_block: str) -> re.Pattern[str]:
    if not root_block:
        return re.compile(_LINE_BREAK, re.IGNORECASE)

    tag = re.escape(root_block)
    return re.compile(
        rf"<{tag}(?:\s[^>]*)?>{_BLANK_INNER}</{tag}\s*>|{_LINE_BREAK}",
        re.IGNORECASE,
    )


def is_empty_content(content: str | None, root_block: str = DEFAULT_ROOT_BLOCK) -> bool:
    """Return True when content carries no user input.

    Args:
        content: Serialized editor content (None is treated as "")
        root_block: Tag the editor wraps an empty paragraph in; "" disables
            the root block rule

    Returns:
        True for "", a single blank root block, or a lone line break

    """
    trimmed = (content or "").strip()
    if not trimmed:
        return True
    return _empty_pattern(root_block.strip().lower()).fullmatch(trimmed) is not None
