"""ExplorerSession: current folder, selection, rename editing and clipboard."""

from __future__ import annotations

import logging
from typing import Optional

from vfsmgr.config import ExplorerConfig
from vfsmgr.errors import (
    InvalidArgumentError,
    InvalidStateError,
    InvalidTargetError,
    NotFoundError,
)
from vfsmgr.models import ClipboardMode, ClipboardState, ItemKind, SelectionState
from vfsmgr.store import ItemStore

logger = logging.getLogger(__name__)


class ExplorerSession:
    """
    Transient view state layered over an ItemStore.

    The session is the only caller that mutates the store on behalf of the
    UI, so it can keep selection, clipboard and the open folder consistent
    with what the store holds.
    """

    def __init__(self, store: ItemStore, *, config: Optional[ExplorerConfig] = None) -> None:
        self.store = store
        self.config = config or ExplorerConfig()
        self._current_folder_id = store.root_id
        self._selected: dict[str, None] = {}
        self._editing_id: Optional[str] = None
        self._clipboard: Optional[ClipboardState] = None

    # ----------------------------
    # State accessors
    # ----------------------------
    @property
    def current_folder_id(self) -> str:
        return self._current_folder_id

    @property
    def selected_ids(self) -> list[str]:
        return list(self._selected)

    @property
    def editing_id(self) -> Optional[str]:
        return self._editing_id

    @property
    def clipboard(self) -> Optional[ClipboardState]:
        return self._clipboard

    @property
    def state(self) -> SelectionState:
        return SelectionState(
            current_folder_id=self._current_folder_id,
            selected_ids=list(self._selected),
            editing_id=self._editing_id,
        )

    # ----------------------------
    # Navigation and selection
    # ----------------------------
    def set_current_folder(self, folder_id: str) -> None:
        item = self.store.get_by_id(folder_id)
        if item is None:
            raise NotFoundError(f"Folder does not exist: {folder_id}", details={"id": folder_id})
        if not item.is_folder:
            raise InvalidTargetError(f"Not a folder: {folder_id}", details={"id": folder_id})

        self._current_folder_id = folder_id
        self._editing_id = None
        if self.config.clear_selection_on_navigate:
            self._selected.clear()
        logger.debug(f"Navigated to {folder_id}")

    def select(self, item_id: str, additive: bool = False) -> None:
        """Replace the selection with item_id, or toggle it when additive."""
        if not self.store.has(item_id):
            raise NotFoundError(f"Item does not exist: {item_id}", details={"id": item_id})

        if not additive:
            self._selected = {item_id: None}
        elif item_id in self._selected:
            del self._selected[item_id]
        else:
            self._selected[item_id] = None
        logger.debug(f"Selection: {list(self._selected)}")

    def select_all(self) -> None:
        children = self.store.list_children(self._current_folder_id)
        self._selected = {item.id: None for item in children}

    def clear_selection(self) -> None:
        self._selected.clear()

    # ----------------------------
    # Rename editing
    # ----------------------------
    def begin_rename(self, item_id: str) -> None:
        if not self.store.has(item_id):
            raise NotFoundError(f"Item does not exist: {item_id}", details={"id": item_id})
        self._editing_id = item_id

    def commit_rename(self, new_name: str) -> bool:
        """
        Apply the in-progress rename.

        Returns:
            True if the name changed, False if it was left as is.
        """
        if self._editing_id is None:
            raise InvalidStateError("No rename in progress")

        item_id = self._editing_id
        item = self.store.get_by_id(item_id)
        if item is None:
            self._editing_id = None
            raise NotFoundError(f"Item does not exist: {item_id}", details={"id": item_id})

        if new_name == item.name:
            self._editing_id = None
            return False

        self.store.rename_item(item_id, new_name)
        self._editing_id = None
        return True

    def cancel_rename(self) -> None:
        self._editing_id = None

    # ----------------------------
    # Clipboard
    # ----------------------------
    def cut(self, item_ids: list[str]) -> None:
        self._capture(item_ids, ClipboardMode.CUT)

    def copy(self, item_ids: list[str]) -> None:
        self._capture(item_ids, ClipboardMode.COPY)

    def clear_clipboard(self) -> None:
        self._clipboard = None

    def paste(self) -> list[str]:
        """
        Apply the clipboard to the current folder.

        Returns:
            Moved ids for a cut, new duplicate ids for a copy, [] when empty.
        """
        clip = self._clipboard
        if clip is None:
            return []

        if clip.mode is ClipboardMode.CUT:
            ids = list(clip.item_ids)
            self.move(ids, self._current_folder_id)
            self._clipboard = None
            logger.info(f"Pasted (cut) {len(ids)} item(s) into {self._current_folder_id}")
            return ids

        new_ids = self.copy_into(list(clip.item_ids), self._current_folder_id)
        logger.info(f"Pasted (copy) {len(new_ids)} item(s) into {self._current_folder_id}")
        return new_ids

    # ----------------------------
    # Store mutations
    # ----------------------------
    def create(
        self,
        name: str,
        kind: ItemKind,
        parent_id: Optional[str] = None,
        *,
        size: Optional[int] = None,
    ) -> str:
        target = parent_id if parent_id is not None else self._current_folder_id
        return self.store.create_item(name, kind, target, size=size)

    def rename(self, item_id: str, new_name: str) -> None:
        self.store.rename_item(item_id, new_name)
        if self._editing_id == item_id:
            self._editing_id = None

    def move(self, item_ids: list[str], target_folder_id: str) -> None:
        self.store.move_items(item_ids, target_folder_id)
        self._selected.clear()

    def copy_into(self, item_ids: list[str], target_folder_id: str) -> list[str]:
        return self.store.copy_items_into(
            item_ids,
            target_folder_id,
            deep=self.config.deep_copy_folders,
            prefix=self.config.copy_name_prefix,
        )

    def delete(self, item_ids: list[str]) -> list[str]:
        # Nearest surviving ancestor, in case the open folder goes away.
        fallback = [self._current_folder_id] + self.store.ancestor_ids(self._current_folder_id)

        removed = self.store.delete_items(item_ids)
        gone = set(removed)

        self._selected.clear()
        if self._editing_id in gone:
            self._editing_id = None

        if self._clipboard is not None:
            kept = tuple(i for i in self._clipboard.item_ids if i not in gone)
            if not kept:
                self._clipboard = None
            elif len(kept) != len(self._clipboard.item_ids):
                self._clipboard = ClipboardState(
                    item_ids=kept,
                    mode=self._clipboard.mode,
                    source_folder_id=self._clipboard.source_folder_id,
                )

        if self._current_folder_id in gone:
            survivor = next(fid for fid in fallback if fid not in gone)
            self._current_folder_id = survivor
            logger.debug(f"Open folder was deleted; navigated to {survivor}")

        return removed

    # ----------------------------
    # Internals
    # ----------------------------
    def _capture(self, item_ids: list[str], mode: ClipboardMode) -> None:
        if not item_ids:
            raise InvalidArgumentError(f"{mode.value} requires at least one item id")
        self._clipboard = ClipboardState(
            item_ids=tuple(dict.fromkeys(item_ids)),
            mode=mode,
            source_folder_id=self._current_folder_id,
        )
        logger.debug(f"Clipboard <- {mode.value} {list(self._clipboard.item_ids)}")
