"""Data model for store items."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class ItemKind(str, Enum):
    """Item variants. Immutable after creation."""

    FILE = "file"
    FOLDER = "folder"


@dataclass(slots=True)
class Item:
    """
    Represents a File or Folder node tracked by the store.

    Notes:
        - parent_id is None only for the root folder.
        - size and extension are only ever set for files; size is a stored
          byte count with no content behind it.
    """

    id: str
    name: str
    kind: ItemKind
    parent_id: Optional[str]
    last_modified: datetime

    size: Optional[int] = None
    extension: Optional[str] = None

    @property
    def is_folder(self) -> bool:
        return self.kind is ItemKind.FOLDER

    @property
    def is_file(self) -> bool:
        return self.kind is ItemKind.FILE
