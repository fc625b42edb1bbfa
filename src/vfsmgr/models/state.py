"""Selection and clipboard state models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ClipboardMode(str, Enum):
    """Cut pastes once (move); Copy pastes repeatedly (duplicate)."""

    CUT = "cut"
    COPY = "copy"


@dataclass(frozen=True)
class ClipboardState:
    """Items captured by cut/copy, plus the folder that was open at the time."""

    item_ids: tuple[str, ...]
    mode: ClipboardMode
    source_folder_id: str


@dataclass(slots=True)
class SelectionState:
    """
    Transient view state.

    selected_ids is an insertion-ordered list with set semantics. It is not
    scoped to current_folder_id by the store.
    """

    current_folder_id: str
    selected_ids: list[str] = field(default_factory=list)
    editing_id: Optional[str] = None


@dataclass(frozen=True)
class BreadcrumbEntry:
    """One step of a root-to-folder path."""

    id: str
    name: str
