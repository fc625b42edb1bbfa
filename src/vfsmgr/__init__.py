"""vfsmgr public API."""

from __future__ import annotations

from vfsmgr.commands import DragAction, DragPayload, Shortcut, resolve_shortcut
from vfsmgr.config import ExplorerConfig
from vfsmgr.errors import (
    CorruptTreeError,
    CyclicMoveError,
    EmptyNameError,
    ErrorKind,
    ForbiddenRootDeletionError,
    InvalidArgumentError,
    InvalidStateError,
    InvalidTargetError,
    NotFoundError,
    VfsMgrError,
    error_kind,
)
from vfsmgr.manager import ExplorerManager, ExplorerView
from vfsmgr.models import (
    BreadcrumbEntry,
    ClipboardMode,
    ClipboardState,
    CommandResult,
    Item,
    ItemKind,
    SelectionState,
)
from vfsmgr.navigation import FolderNode, NavigationView
from vfsmgr.session import ExplorerSession
from vfsmgr.store import ItemStore

__all__ = [
    # High-level
    "ExplorerManager",
    "ExplorerView",
    "ExplorerConfig",
    "ExplorerSession",
    "ItemStore",
    "NavigationView",
    "FolderNode",
    # Commands
    "DragAction",
    "DragPayload",
    "Shortcut",
    "resolve_shortcut",
    # Models
    "Item",
    "ItemKind",
    "BreadcrumbEntry",
    "ClipboardMode",
    "ClipboardState",
    "SelectionState",
    "CommandResult",
    # Errors
    "VfsMgrError",
    "NotFoundError",
    "InvalidTargetError",
    "CyclicMoveError",
    "EmptyNameError",
    "ForbiddenRootDeletionError",
    "InvalidArgumentError",
    "InvalidStateError",
    "CorruptTreeError",
    "ErrorKind",
    "error_kind",
]
