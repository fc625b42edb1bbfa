"""Public error exports for vfsmgr."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
