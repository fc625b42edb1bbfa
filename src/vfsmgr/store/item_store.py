"""ItemStore: the in-memory item tree and its mutation/query engine."""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime
from typing import Iterable, Optional

from vfsmgr.errors import CorruptTreeError, InvalidArgumentError
from vfsmgr.models import BreadcrumbEntry, Item, ItemKind
from vfsmgr.util.ids import new_item_id
from vfsmgr.util.names import copy_name, derive_extension
from vfsmgr.util.time import normalize_dt, now_utc

from .index import ItemIndex
from .validators import (
    validate_all_exist,
    validate_exists,
    validate_is_folder,
    validate_move_no_cycle,
    validate_name,
    validate_non_empty_ids,
    validate_not_root,
    validate_size,
)

logger = logging.getLogger(__name__)


class ItemStore:
    """
    Owns every File/Folder item and enforces the tree invariants.

    Every mutating method validates its whole input before touching the
    index, so a rejected call leaves the store unchanged.
    """

    def __init__(
        self,
        root_id: str,
        index: ItemIndex,
        *,
        touch_on_mutation: bool = False,
    ) -> None:
        self.root_id = root_id
        self._index = index
        self._touch_on_mutation = touch_on_mutation

    @classmethod
    def with_root(cls, name: str = "Root", root_id: str = "root", **kwargs) -> ItemStore:
        root = Item(
            id=root_id,
            name=name,
            kind=ItemKind.FOLDER,
            parent_id=None,
            last_modified=now_utc(),
        )
        return cls(root_id, ItemIndex.from_items([root]), **kwargs)

    @classmethod
    def from_items(cls, root_id: str, items: list[Item], **kwargs) -> ItemStore:
        """
        Build a store from existing items, rejecting malformed trees.

        Raises:
            InvalidArgumentError: duplicate ids, missing/extra roots, dangling
                or non-folder parents, cycles, or file-only fields on folders.
        """
        _validate_initial_items(root_id, items)
        return cls(root_id, ItemIndex.from_items(items), **kwargs)

    def clone(self) -> ItemStore:
        return ItemStore(
            self.root_id,
            self._index.clone(),
            touch_on_mutation=self._touch_on_mutation,
        )

    # ----------------------------
    # Read APIs (never raise)
    # ----------------------------
    def __len__(self) -> int:
        return len(self._index)

    def has(self, item_id: str) -> bool:
        return self._index.has(item_id)

    def get_by_id(self, item_id: str) -> Optional[Item]:
        if not self._index.has(item_id):
            return None
        return self._index.get(item_id)

    def items(self) -> list[Item]:
        return list(self._index.items_by_id.values())

    def list_children(self, folder_id: str) -> list[Item]:
        """Children of folder_id in creation order; empty if folder_id is unknown."""
        return [self._index.get(cid) for cid in self._index.list_children_ids(folder_id)]

    def breadcrumb_path(self, folder_id: str) -> list[BreadcrumbEntry]:
        """
        Root-to-folder path, inclusive.

        Unknown folder_id gives an empty path; a dangling parent ends the walk.

        Raises:
            CorruptTreeError: the walk took more steps than there are items.
        """
        path: deque[BreadcrumbEntry] = deque()
        cur: Optional[str] = folder_id
        bound = len(self._index)

        while cur is not None and self._index.has(cur):
            if len(path) >= bound:
                raise CorruptTreeError(
                    "Parent chain exceeds item count (cycle in stored data)",
                    details={"folder_id": folder_id},
                )
            item = self._index.get(cur)
            path.appendleft(BreadcrumbEntry(id=item.id, name=item.name))
            cur = item.parent_id

        return list(path)

    def ancestor_ids(self, item_id: str) -> list[str]:
        """Ids from the direct parent up to the root."""
        return [entry.id for entry in self.breadcrumb_path(item_id)][-2::-1]

    def is_ancestor(self, ancestor_id: str, item_id: str) -> bool:
        return ancestor_id in self.ancestor_ids(item_id)

    def descendant_ids(self, item_ids: Iterable[str]) -> list[str]:
        """
        Transitive descendants of item_ids (not including item_ids themselves).

        Expands by repeated child lookup until no new ids appear.
        """
        seen: set[str] = set(item_ids)
        found: list[str] = []
        q: deque[str] = deque(seen)

        while q:
            cur = q.popleft()
            for child_id in self._index.list_children_ids(cur):
                if child_id in seen:
                    continue
                seen.add(child_id)
                found.append(child_id)
                q.append(child_id)

        return found

    # ----------------------------
    # Mutation APIs
    # ----------------------------
    def create_item(
        self,
        name: str,
        kind: ItemKind,
        parent_id: str,
        *,
        size: Optional[int] = None,
    ) -> str:
        validate_name(name, "Name")
        kind = _coerce_kind(kind)
        validate_exists(self._index, parent_id, "Parent")
        validate_is_folder(self._index, parent_id, "Parent")

        item = Item(
            id=self._fresh_id(kind),
            name=name,
            kind=kind,
            parent_id=parent_id,
            last_modified=now_utc(),
        )
        if kind is ItemKind.FILE:
            item.size = 0 if size is None else size
            validate_size(item.size)
            item.extension = derive_extension(name)
        elif size is not None:
            raise InvalidArgumentError("Folders do not carry a size")

        self._index.add_item(item)
        logger.info(f"Created {kind.value} {name!r} ({item.id}) in {parent_id}")
        return item.id

    def rename_item(self, item_id: str, new_name: str) -> None:
        validate_name(new_name, "New name")
        validate_exists(self._index, item_id, "Item")

        item = self._index.get(item_id)
        old_name = item.name
        item.name = new_name
        if item.is_file:
            item.extension = derive_extension(new_name)
        if self._touch_on_mutation:
            item.last_modified = now_utc()

        logger.info(f"Renamed {item_id}: {old_name!r} -> {new_name!r}")

    def move_items(self, item_ids: list[str], target_folder_id: str) -> None:
        validate_non_empty_ids(item_ids, "MOVE")
        validate_all_exist(self._index, item_ids, "Item")
        validate_exists(self._index, target_folder_id, "Target folder")
        validate_is_folder(self._index, target_folder_id, "Target folder")
        validate_move_no_cycle(self._index, set(item_ids), target_folder_id)

        stamp = now_utc()
        for item_id in dict.fromkeys(item_ids):
            self._index.replace_parent(item_id, target_folder_id)
            if self._touch_on_mutation:
                self._index.get(item_id).last_modified = stamp

        logger.info(f"Moved items [{', '.join(item_ids)}] to folder: {target_folder_id}")

    def delete_items(self, item_ids: list[str]) -> list[str]:
        """
        Remove item_ids and all their descendants in one step.

        Returns:
            Every removed id (requested ids first, then descendants).
        """
        validate_non_empty_ids(item_ids, "DELETE")
        validate_not_root(self.root_id, item_ids)
        validate_all_exist(self._index, item_ids, "Item")

        requested = list(dict.fromkeys(item_ids))
        doomed = requested + self.descendant_ids(requested)
        for item_id in doomed:
            self._index.remove_item(item_id)

        logger.info(f"Deleted {len(doomed)} item(s): [{', '.join(doomed)}]")
        return doomed

    def copy_items_into(
        self,
        item_ids: list[str],
        target_folder_id: str,
        *,
        deep: bool = False,
        prefix: str = "Copy of ",
    ) -> list[str]:
        """
        Duplicate item_ids into target_folder_id.

        Each duplicate gets a fresh id and a "Copy of " name. Folders are
        copied empty unless deep is set, in which case their descendants are
        duplicated too (keeping their own names).

        Returns:
            New ids of the top-level duplicates, in request order.
        """
        validate_non_empty_ids(item_ids, "COPY")
        validate_all_exist(self._index, item_ids, "Item")
        validate_exists(self._index, target_folder_id, "Target folder")
        validate_is_folder(self._index, target_folder_id, "Target folder")

        # Snapshot sources first so a deep copy into its own subtree terminates.
        stamp = now_utc()
        pending: list[Item] = []
        new_ids: list[str] = []
        for item_id in item_ids:
            src = self._index.get(item_id)
            dup = self._duplicate(src, target_folder_id, copy_name(src.name, prefix), stamp)
            pending.append(dup)
            new_ids.append(dup.id)
            if deep and src.is_folder:
                pending.extend(self._duplicate_subtree(src.id, dup.id, stamp))

        for dup in pending:
            self._index.add_item(dup)

        logger.info(
            f"Copied items [{', '.join(item_ids)}] to folder: {target_folder_id} "
            f"as [{', '.join(new_ids)}]"
        )
        return new_ids

    # ----------------------------
    # Internals
    # ----------------------------
    def _fresh_id(self, kind: ItemKind) -> str:
        new_id = new_item_id(kind)
        while self._index.has(new_id):
            new_id = new_item_id(kind)
        return new_id

    def _duplicate(self, src: Item, parent_id: str, name: str, stamp: datetime) -> Item:
        return Item(
            id=self._fresh_id(src.kind),
            name=name,
            kind=src.kind,
            parent_id=parent_id,
            last_modified=stamp,
            size=src.size,
            extension=src.extension,
        )

    def _duplicate_subtree(
        self,
        src_folder_id: str,
        dup_folder_id: str,
        stamp: datetime,
    ) -> list[Item]:
        out: list[Item] = []
        q: deque[tuple[str, str]] = deque([(src_folder_id, dup_folder_id)])
        while q:
            src_parent, dup_parent = q.popleft()
            for child_id in self._index.list_children_ids(src_parent):
                child = self._index.get(child_id)
                dup = self._duplicate(child, dup_parent, child.name, stamp)
                out.append(dup)
                if child.is_folder:
                    q.append((child.id, dup.id))
        return out


def _coerce_kind(kind: ItemKind | str) -> ItemKind:
    try:
        return ItemKind(kind)
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown item kind: {kind!r}", cause=exc) from exc


def _validate_initial_items(root_id: str, items: list[Item]) -> None:
    by_id: dict[str, Item] = {}
    for item in items:
        if item.id in by_id:
            raise InvalidArgumentError(f"Duplicate item id: {item.id}")
        by_id[item.id] = item

    root = by_id.get(root_id)
    if root is None:
        raise InvalidArgumentError(f"Root does not exist: {root_id}")
    if not root.is_folder or root.parent_id is not None:
        raise InvalidArgumentError("Root must be a folder without a parent")

    for item in items:
        try:
            normalize_dt(item.last_modified)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"last_modified must be a tz-aware datetime: {item.id}", cause=exc
            ) from exc
        if item.id != root_id:
            if item.parent_id is None:
                raise InvalidArgumentError(f"Only the root may lack a parent: {item.id}")
            parent = by_id.get(item.parent_id)
            if parent is None or not parent.is_folder:
                raise InvalidArgumentError(
                    f"Parent must be an existing folder: {item.id} -> {item.parent_id}"
                )
        if item.is_folder and (item.size is not None or item.extension is not None):
            raise InvalidArgumentError(f"Folders do not carry size/extension: {item.id}")
        if item.is_file and item.size is not None:
            validate_size(item.size)

    # Every item must reach the root within len(items) steps.
    for item in items:
        cur: Optional[str] = item.id
        steps = 0
        while cur is not None:
            if steps > len(items):
                raise InvalidArgumentError(f"Cycle in parent chain of {item.id}")
            cur = by_id[cur].parent_id
            steps += 1
