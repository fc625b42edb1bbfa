"""NavigationView: derivations computed on demand from an ItemStore."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from vfsmgr.models import BreadcrumbEntry, Item
from vfsmgr.store import ItemStore


@dataclass(slots=True)
class FolderNode:
    """One folder in the folder tree panel, with its sub-folders."""

    item: Item
    children: list[FolderNode] = field(default_factory=list)


class NavigationView:
    """Stateless queries over a store; safe to recompute after every command."""

    def __init__(self, store: ItemStore) -> None:
        self._store = store

    def children_of(self, folder_id: str) -> list[Item]:
        return self._store.list_children(folder_id)

    def breadcrumbs_for(self, folder_id: str) -> list[BreadcrumbEntry]:
        return self._store.breadcrumb_path(folder_id)

    def subfolders_of(self, folder_id: str) -> list[Item]:
        return [item for item in self._store.list_children(folder_id) if item.is_folder]

    def folder_tree(self, root_id: Optional[str] = None) -> Optional[FolderNode]:
        """
        Nested folders-only tree starting at root_id (store root by default).

        Returns None if root_id is unknown or not a folder.
        """
        start = self._store.get_by_id(root_id if root_id is not None else self._store.root_id)
        if start is None or not start.is_folder:
            return None

        top = FolderNode(item=start)
        stack: list[FolderNode] = [top]
        while stack:
            node = stack.pop()
            for sub in self.subfolders_of(node.item.id):
                child = FolderNode(item=sub)
                node.children.append(child)
                stack.append(child)
        return top
