from .ids import new_item_id, new_uuid
from .names import (
    IMAGE_EXTENSIONS,
    copy_name,
    derive_extension,
    format_size_kib,
    is_blank,
    preview_kind,
)
from .time import normalize_dt, now_utc

__all__ = [
    "new_uuid",
    "new_item_id",
    "IMAGE_EXTENSIONS",
    "is_blank",
    "derive_extension",
    "copy_name",
    "format_size_kib",
    "preview_kind",
    "now_utc",
    "normalize_dt",
]
