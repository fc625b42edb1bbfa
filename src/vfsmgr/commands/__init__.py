"""Public command exports for vfsmgr."""

from __future__ import annotations

from .actions import DragAction, Shortcut
from .drag import DragPayload
from .shortcuts import resolve_shortcut

__all__ = [
    "DragAction",
    "Shortcut",
    "DragPayload",
    "resolve_shortcut",
]
