"""Exception hierarchy and error-kind mapping for vfsmgr."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class VfsMgrError(Exception):
    """
    Base exception for vfsmgr.

    Attributes:
        details: Optional structured information (e.g., item id, target id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class NotFoundError(VfsMgrError):
    """Raised when a referenced item id does not exist."""


class InvalidTargetError(VfsMgrError):
    """Raised when a parent/target id refers to something that is not a folder."""


class CyclicMoveError(VfsMgrError):
    """Raised when a move would make an item its own ancestor."""


class EmptyNameError(VfsMgrError):
    """Raised when create/rename is given a blank name."""


class ForbiddenRootDeletionError(VfsMgrError):
    """Raised when a delete includes the root folder."""


class InvalidArgumentError(VfsMgrError):
    """Raised when command arguments are malformed (empty id list, bad payload)."""


class InvalidStateError(VfsMgrError):
    """Raised when the session is used in an invalid state."""


class CorruptTreeError(VfsMgrError):
    """Raised when the parent chain is longer than the store (cycle in data)."""


class ErrorKind(str, Enum):
    """Structured outcome kinds reported to the presentation layer."""

    NOT_FOUND = "NotFound"
    INVALID_TARGET = "InvalidTarget"
    CYCLIC_MOVE = "CyclicMove"
    EMPTY_NAME = "EmptyName"
    FORBIDDEN_ROOT_DELETION = "ForbiddenRootDeletion"
    INVALID_ARGUMENT = "InvalidArgument"
    INVALID_STATE = "InvalidState"
    CORRUPT_TREE = "CorruptTree"
    UNKNOWN = "Unknown"


_KIND_BY_TYPE: tuple[tuple[type[VfsMgrError], ErrorKind], ...] = (
    (NotFoundError, ErrorKind.NOT_FOUND),
    (InvalidTargetError, ErrorKind.INVALID_TARGET),
    (CyclicMoveError, ErrorKind.CYCLIC_MOVE),
    (EmptyNameError, ErrorKind.EMPTY_NAME),
    (ForbiddenRootDeletionError, ErrorKind.FORBIDDEN_ROOT_DELETION),
    (InvalidArgumentError, ErrorKind.INVALID_ARGUMENT),
    (InvalidStateError, ErrorKind.INVALID_STATE),
    (CorruptTreeError, ErrorKind.CORRUPT_TREE),
)


def error_kind(exc: BaseException) -> ErrorKind:
    """
    Map an exception to its ErrorKind.

    Policy:
        - vfsmgr exceptions -> their own kind (subclasses inherit it)
        - anything else -> UNKNOWN
    """
    for exc_type, kind in _KIND_BY_TYPE:
        if isinstance(exc, exc_type):
            return kind
    return ErrorKind.UNKNOWN
