"""ExplorerManager: the serialized command/query surface used by the UI layer."""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from vfsmgr.commands import DragAction, DragPayload, Shortcut, resolve_shortcut
from vfsmgr.config import ExplorerConfig
from vfsmgr.errors import CorruptTreeError, VfsMgrError, error_kind
from vfsmgr.models import (
    BreadcrumbEntry,
    ClipboardState,
    CommandResult,
    Item,
    ItemKind,
)
from vfsmgr.navigation import NavigationView
from vfsmgr.sample import SAMPLE_ROOT_ID, sample_items
from vfsmgr.session import ExplorerSession
from vfsmgr.store import ItemStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExplorerView:
    """Everything the UI needs to redraw after a command."""

    current_folder_id: str
    breadcrumbs: list[BreadcrumbEntry]
    children: list[Item]
    selected_ids: list[str]
    clipboard: Optional[ClipboardState]
    editing_id: Optional[str]


class ExplorerManager:
    """
    Single owner of one store and one session.

    Every command runs under one lock, so no caller can observe a partially
    applied move or delete. Commands never raise for rejected input; they
    return a failed CommandResult instead. Queries return copies.
    """

    def __init__(
        self,
        store: Optional[ItemStore] = None,
        *,
        config: Optional[ExplorerConfig] = None,
    ) -> None:
        self.config = config or ExplorerConfig()
        if store is None:
            store = ItemStore.with_root(touch_on_mutation=self.config.touch_on_mutation)
        self._store = store
        self._session = ExplorerSession(store, config=self.config)
        self._nav = NavigationView(store)
        self._lock = threading.RLock()

    @classmethod
    def with_sample_tree(cls, *, config: Optional[ExplorerConfig] = None) -> ExplorerManager:
        """Create a manager seeded with the demo Documents/Images tree."""
        use_config = config or ExplorerConfig()
        store = ItemStore.from_items(
            SAMPLE_ROOT_ID,
            sample_items(),
            touch_on_mutation=use_config.touch_on_mutation,
        )
        return cls(store, config=use_config)

    # ----------------------------
    # Queries
    # ----------------------------
    @property
    def current_folder_id(self) -> str:
        with self._lock:
            return self._session.current_folder_id

    @property
    def selected_ids(self) -> list[str]:
        with self._lock:
            return self._session.selected_ids

    @property
    def clipboard(self) -> Optional[ClipboardState]:
        with self._lock:
            return self._session.clipboard

    def get_item(self, item_id: str) -> Optional[Item]:
        with self._lock:
            item = self._store.get_by_id(item_id)
            return dataclasses.replace(item) if item is not None else None

    def children(self, folder_id: Optional[str] = None) -> list[Item]:
        with self._lock:
            target = folder_id if folder_id is not None else self._session.current_folder_id
            return [dataclasses.replace(item) for item in self._nav.children_of(target)]

    def breadcrumbs(self, folder_id: Optional[str] = None) -> list[BreadcrumbEntry]:
        with self._lock:
            target = folder_id if folder_id is not None else self._session.current_folder_id
            return self._nav.breadcrumbs_for(target)

    def view(self) -> ExplorerView:
        with self._lock:
            state = self._session.state
            return ExplorerView(
                current_folder_id=state.current_folder_id,
                breadcrumbs=self._nav.breadcrumbs_for(state.current_folder_id),
                children=self.children(state.current_folder_id),
                selected_ids=state.selected_ids,
                clipboard=self._session.clipboard,
                editing_id=state.editing_id,
            )

    # ----------------------------
    # Commands
    # ----------------------------
    def navigate(self, folder_id: str) -> CommandResult:
        return self._run("navigate", self._session.set_current_folder, folder_id)

    def select(self, item_id: str, additive: bool = False) -> CommandResult:
        return self._run("select", self._session.select, item_id, additive)

    def select_all(self) -> CommandResult:
        return self._run("select_all", self._session.select_all)

    def clear_selection(self) -> CommandResult:
        return self._run("clear_selection", self._session.clear_selection)

    def create(
        self,
        name: str,
        kind: ItemKind,
        parent_id: Optional[str] = None,
        *,
        size: Optional[int] = None,
    ) -> CommandResult:
        return self._run("create", self._session.create, name, kind, parent_id, size=size)

    def rename(self, item_id: str, new_name: str) -> CommandResult:
        return self._run("rename", self._session.rename, item_id, new_name)

    def move(self, item_ids: list[str], target_folder_id: str) -> CommandResult:
        return self._run("move", self._session.move, list(item_ids), target_folder_id)

    def copy_into(self, item_ids: list[str], target_folder_id: str) -> CommandResult:
        return self._run("copy_into", self._session.copy_into, list(item_ids), target_folder_id)

    def delete(self, item_ids: list[str]) -> CommandResult:
        return self._run("delete", self._session.delete, list(item_ids))

    def cut(self, item_ids: Optional[list[str]] = None) -> CommandResult:
        """Cut item_ids, or the current selection when omitted."""
        with self._lock:
            ids = list(item_ids) if item_ids is not None else self._session.selected_ids
            return self._run("cut", self._session.cut, ids)

    def copy_to_clipboard(self, item_ids: Optional[list[str]] = None) -> CommandResult:
        """Copy item_ids, or the current selection when omitted."""
        with self._lock:
            ids = list(item_ids) if item_ids is not None else self._session.selected_ids
            return self._run("copy_to_clipboard", self._session.copy, ids)

    def paste(self) -> CommandResult:
        return self._run("paste", self._session.paste)

    def clear_clipboard(self) -> CommandResult:
        return self._run("clear_clipboard", self._session.clear_clipboard)

    def begin_rename(self, item_id: str) -> CommandResult:
        return self._run("begin_rename", self._session.begin_rename, item_id)

    def commit_rename(self, new_name: str) -> CommandResult:
        return self._run("commit_rename", self._session.commit_rename, new_name)

    def cancel_rename(self) -> CommandResult:
        return self._run("cancel_rename", self._session.cancel_rename)

    def drop(
        self,
        payload: DragPayload | dict[str, Any] | str,
        target_folder_id: str,
    ) -> CommandResult:
        """
        Apply a drag payload dropped onto target_folder_id.

        Raw transport data (a JSON string or decoded dict) is validated into a
        DragPayload first; a malformed payload yields a failed result.
        """
        return self._run("drop", self._apply_drop, payload, target_folder_id)

    def handle_shortcut(self, key: str, *, ctrl: bool = False) -> Optional[CommandResult]:
        """
        Translate a key press into a command.

        Returns:
            The command's result, or None if the key is unbound or the
            shortcut needs a selection and there is none.
        """
        shortcut = resolve_shortcut(key, ctrl=ctrl)
        if shortcut is None:
            return None

        with self._lock:
            selected = self._session.selected_ids

            if shortcut is Shortcut.SELECT_ALL:
                return self.select_all()
            if shortcut is Shortcut.PASTE:
                if self._session.clipboard is None:
                    return None
                return self.paste()
            if shortcut is Shortcut.RENAME:
                if len(selected) != 1:
                    return None
                return self.begin_rename(selected[0])

            if not selected:
                return None
            if shortcut is Shortcut.CUT:
                return self.cut(selected)
            if shortcut is Shortcut.COPY:
                return self.copy_to_clipboard(selected)
            if shortcut is Shortcut.DELETE:
                return self.delete(selected)

        return None

    # ----------------------------
    # Internals
    # ----------------------------
    def _apply_drop(
        self,
        payload: DragPayload | dict[str, Any] | str,
        target_folder_id: str,
    ) -> list[str]:
        if isinstance(payload, str):
            payload = DragPayload.from_json(payload)
        elif not isinstance(payload, DragPayload):
            payload = DragPayload.from_dict(payload)

        ids = list(payload.item_ids)
        if payload.action is DragAction.COPY:
            return self._session.copy_into(ids, target_folder_id)
        self._session.move(ids, target_folder_id)
        return ids

    def _run(
        self,
        command: str,
        fn: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> CommandResult:
        with self._lock:
            try:
                value = fn(*args, **kwargs)
            except VfsMgrError as exc:
                if _is_fatal(exc):
                    raise
                logger.warning(f"{command} rejected: {exc.__class__.__name__}: {exc}")
                return _failed_result(command, exc)
        return _success_result(command, value)


def _is_fatal(exc: VfsMgrError) -> bool:
    return isinstance(exc, CorruptTreeError)


def _success_result(command: str, value: Any) -> CommandResult:
    return CommandResult(command=command, status="success", value=value)


def _failed_result(command: str, exc: VfsMgrError) -> CommandResult:
    return CommandResult(
        command=command,
        status="failed",
        error_type=exc.__class__.__name__,
        error_kind=error_kind(exc).value,
        error_message=str(exc),
        error_details=getattr(exc, "details", None),
    )
