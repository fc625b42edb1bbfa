"""Command actions for vfsmgr."""

from __future__ import annotations

from enum import Enum


class DragAction(str, Enum):
    """What a drop does with the dragged items."""

    MOVE = "move"
    COPY = "copy"


class Shortcut(str, Enum):
    """Keyboard shortcuts understood by the explorer."""

    SELECT_ALL = "SELECT_ALL"
    CUT = "CUT"
    COPY = "COPY"
    PASTE = "PASTE"
    DELETE = "DELETE"
    RENAME = "RENAME"
