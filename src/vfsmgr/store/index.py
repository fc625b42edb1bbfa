"""Item index for ItemStore."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from vfsmgr.models import Item


@dataclass(slots=True)
class ItemIndex:
    """
    In-memory representation of every item in the store.

    Indexes:
        - items_by_id
        - children_by_parent_id
        - ordinal_by_id (insertion order, keeps listings in creation order)
    """

    items_by_id: dict[str, Item] = field(default_factory=dict)
    children_by_parent_id: dict[str, set[str]] = field(default_factory=dict)
    ordinal_by_id: dict[str, int] = field(default_factory=dict)
    _counter: itertools.count = field(default_factory=itertools.count)

    @classmethod
    def from_items(cls, items: list[Item]) -> ItemIndex:
        index = cls()
        for item in items:
            index._insert_item(item)
        return index

    def clone(self) -> ItemIndex:
        """Deep-clone this index (including Item objects)."""
        new_items: dict[str, Item] = {}
        for item_id, item in self.items_by_id.items():
            new_items[item_id] = Item(
                id=item.id,
                name=item.name,
                kind=item.kind,
                parent_id=item.parent_id,
                last_modified=item.last_modified,
                size=item.size,
                extension=item.extension,
            )

        new_children: dict[str, set[str]] = {
            parent: set(children) for parent, children in self.children_by_parent_id.items()
        }

        next_ordinal = max(self.ordinal_by_id.values(), default=-1) + 1
        return ItemIndex(
            items_by_id=new_items,
            children_by_parent_id=new_children,
            ordinal_by_id=dict(self.ordinal_by_id),
            _counter=itertools.count(next_ordinal),
        )

    # ----------------------------
    # Query helpers
    # ----------------------------
    def __len__(self) -> int:
        return len(self.items_by_id)

    def has(self, item_id: str) -> bool:
        return item_id in self.items_by_id

    def get(self, item_id: str) -> Item:
        return self.items_by_id[item_id]

    def list_children_ids(self, parent_id: str) -> list[str]:
        children = self.children_by_parent_id.get(parent_id, set())
        return sorted(children, key=lambda cid: self.ordinal_by_id[cid])

    # ----------------------------
    # Mutation helpers (keep indexes consistent)
    # ----------------------------
    def add_item(self, item: Item) -> None:
        self._insert_item(item)

    def remove_item(self, item_id: str) -> None:
        """Remove one item. Children are not touched; callers remove the closure."""
        item = self.items_by_id.pop(item_id, None)
        if item is None:
            return

        if item.parent_id is not None:
            self.children_by_parent_id.get(item.parent_id, set()).discard(item_id)
        self.children_by_parent_id.pop(item_id, None)
        self.ordinal_by_id.pop(item_id, None)

    def replace_parent(self, item_id: str, new_parent_id: str) -> None:
        item = self.items_by_id[item_id]
        if item.parent_id is not None:
            self.children_by_parent_id.get(item.parent_id, set()).discard(item_id)

        item.parent_id = new_parent_id
        self.children_by_parent_id.setdefault(new_parent_id, set()).add(item_id)

    # ----------------------------
    # Internal index maintenance
    # ----------------------------
    def _insert_item(self, item: Item) -> None:
        self.items_by_id[item.id] = item
        self.ordinal_by_id[item.id] = next(self._counter)

        self.children_by_parent_id.setdefault(item.id, set())
        if item.parent_id is not None:
            self.children_by_parent_id.setdefault(item.parent_id, set()).add(item.id)
