"""Behaviour switches for the explorer session."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExplorerConfig:
    """
    Session-wide options.

    Attributes:
        clear_selection_on_navigate: Drop the selection when the open folder changes.
        deep_copy_folders: Duplicate folder contents on copy/paste (default copies
            folders empty).
        touch_on_mutation: Refresh last_modified on rename and move.
        copy_name_prefix: Prefix given to duplicated item names.
    """

    clear_selection_on_navigate: bool = True
    deep_copy_folders: bool = False
    touch_on_mutation: bool = False
    copy_name_prefix: str = "Copy of "
