"""Demo tree shown by the explorer on first start."""

from __future__ import annotations

from typing import Optional

from vfsmgr.models import Item, ItemKind
from vfsmgr.util.names import derive_extension
from vfsmgr.util.time import now_utc

SAMPLE_ROOT_ID: str = "root"

# (id, name, kind, parent_id, size)
_SAMPLE_ROWS: tuple[tuple[str, str, ItemKind, Optional[str], Optional[int]], ...] = (
    ("root", "Root", ItemKind.FOLDER, None, None),
    ("folder-1", "Documents", ItemKind.FOLDER, "root", None),
    ("folder-2", "Images", ItemKind.FOLDER, "root", None),
    ("file-1", "document.pdf", ItemKind.FILE, "folder-1", 1024),
    ("file-2", "image.jpg", ItemKind.FILE, "folder-2", 2048),
    ("file-3", "notes.txt", ItemKind.FILE, "folder-1", 512),
    ("folder-3", "Projects", ItemKind.FOLDER, "folder-1", None),
    ("file-4", "project-plan.pdf", ItemKind.FILE, "folder-3", 3072),
    ("file-5", "background.png", ItemKind.FILE, "folder-2", 4096),
)


def sample_items() -> list[Item]:
    """Fresh Item objects for the demo tree (all stamped with the current time)."""
    stamp = now_utc()
    items: list[Item] = []
    for item_id, name, kind, parent_id, size in _SAMPLE_ROWS:
        items.append(
            Item(
                id=item_id,
                name=name,
                kind=kind,
                parent_id=parent_id,
                last_modified=stamp,
                size=size,
                extension=derive_extension(name) if kind is ItemKind.FILE else None,
            )
        )
    return items
