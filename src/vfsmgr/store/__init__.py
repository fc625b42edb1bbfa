"""Public store exports for vfsmgr."""

from __future__ import annotations

from .index import ItemIndex
from .item_store import ItemStore

__all__ = [
    "ItemIndex",
    "ItemStore",
]
