"""Small helpers shared across the type-description modules."""

from __future__ import annotations

import string

_HEAD_CHARS = frozenset(string.ascii_letters + "_")
_TAIL_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def is_rust_identifier(s: str) -> bool:
    """Return True if ``s`` is a plain ASCII identifier: a letter or underscore
    followed by letters, digits or underscores."""
    if not s or not s.isascii():
        return False
    head, tail = s[0], s[1:]
    return head in _HEAD_CHARS and all(ch in _TAIL_CHARS for ch in tail)