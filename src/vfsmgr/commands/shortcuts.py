"""Keyboard shortcut resolution."""

from __future__ import annotations

from typing import Optional

from .actions import Shortcut

_CTRL_KEYS: dict[str, Shortcut] = {
    "a": Shortcut.SELECT_ALL,
    "x": Shortcut.CUT,
    "c": Shortcut.COPY,
    "v": Shortcut.PASTE,
}

_PLAIN_KEYS: dict[str, Shortcut] = {
    "Delete": Shortcut.DELETE,
    "F2": Shortcut.RENAME,
}


def resolve_shortcut(key: str, *, ctrl: bool = False) -> Optional[Shortcut]:
    """
    Map a key press to a Shortcut, or None if it is not bound.

    Ctrl chords match letters case-insensitively; Delete and F2 only match
    without Ctrl.
    """
    if ctrl:
        return _CTRL_KEYS.get(key.lower())
    return _PLAIN_KEYS.get(key)
