"""Strict validation helpers for ItemStore."""

from __future__ import annotations

from typing import Iterable

from vfsmgr.errors import (
    CyclicMoveError,
    EmptyNameError,
    ForbiddenRootDeletionError,
    InvalidArgumentError,
    InvalidTargetError,
    NotFoundError,
)
from vfsmgr.util.names import is_blank

from .index import ItemIndex


def validate_exists(index: ItemIndex, item_id: str, what: str) -> None:
    if not index.has(item_id):
        raise NotFoundError(f"{what} does not exist: {item_id}", details={"id": item_id})


def validate_all_exist(index: ItemIndex, item_ids: Iterable[str], what: str) -> None:
    missing = [item_id for item_id in item_ids if not index.has(item_id)]
    if missing:
        raise NotFoundError(
            f"{what} does not exist: {', '.join(missing)}",
            details={"ids": missing},
        )


def validate_is_folder(index: ItemIndex, item_id: str, what: str) -> None:
    if not index.get(item_id).is_folder:
        raise InvalidTargetError(f"{what} must be a folder: {item_id}", details={"id": item_id})


def validate_name(name: str, what: str) -> None:
    if is_blank(name):
        raise EmptyNameError(f"{what} must not be blank", details={"name": name})


def validate_non_empty_ids(item_ids: list[str], action: str) -> None:
    if not item_ids:
        raise InvalidArgumentError(f"{action} requires at least one item id")


def validate_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise InvalidArgumentError(f"size must be a non-negative integer: {size!r}")


def validate_not_root(root_id: str, item_ids: Iterable[str]) -> None:
    if root_id in item_ids:
        raise ForbiddenRootDeletionError("Root is protected: cannot delete root")


def validate_move_no_cycle(
    index: ItemIndex,
    item_ids: set[str],
    target_folder_id: str,
) -> None:
    """
    Reject cycles: if any moved id is the target or on the target's ancestor chain.

    The walk is bounded by the item count so a corrupted chain cannot loop.
    """
    if target_folder_id in item_ids:
        raise CyclicMoveError(
            "MOVE would create a cycle (target is one of the moved items)",
            details={"target_id": target_folder_id},
        )

    cur = index.get(target_folder_id).parent_id
    steps = 0
    while cur is not None and steps <= len(index):
        if cur in item_ids:
            raise CyclicMoveError(
                "MOVE would create a cycle (target is inside a moved folder)",
                details={"target_id": target_folder_id, "ancestor_id": cur},
            )
        if not index.has(cur):
            break
        cur = index.get(cur).parent_id
        steps += 1
