"""Public model exports for vfsmgr."""

from __future__ import annotations

from .item import Item, ItemKind
from .results import CommandResult, CommandStatus
from .state import BreadcrumbEntry, ClipboardMode, ClipboardState, SelectionState

__all__ = [
    "Item",
    "ItemKind",
    "BreadcrumbEntry",
    "ClipboardMode",
    "ClipboardState",
    "SelectionState",
    "CommandStatus",
    "CommandResult",
]
