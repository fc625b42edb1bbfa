from __future__ import annotations

from typing import Optional

from vfsmgr.models import Item

IMAGE_EXTENSIONS: set[str] = {"jpg", "jpeg", "png", "gif", "webp"}


def is_blank(name: Optional[str]) -> bool:
    return name is None or not name.strip()


def derive_extension(name: str) -> Optional[str]:
    """
    Return the text after the last '.' in name.

    Returns None when there is no '.' or nothing follows the last one
    (e.g. "notes", "archive.").
    """
    if "." not in name:
        return None
    ext = name.rsplit(".", 1)[1]
    return ext or None


def copy_name(name: str, prefix: str = "Copy of ") -> str:
    return f"{prefix}{name}"


def format_size_kib(size: Optional[int]) -> str:
    """
    Format a stored byte count for display in kibibytes, one decimal.

    Folders (size None) render as an empty string.
    """
    if size is None:
        return ""
    return f"{size / 1024:.1f} KB"


def preview_kind(item: Item) -> Optional[str]:
    """Return "image" or "pdf" for previewable files, None otherwise."""
    if not item.is_file or not item.extension:
        return None
    ext = item.extension.lower()
    if ext in IMAGE_EXTENSIONS:
        return "image"
    if ext == "pdf":
        return "pdf"
    return None
