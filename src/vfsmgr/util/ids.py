from __future__ import annotations

import uuid

from vfsmgr.models import ItemKind


def new_uuid() -> str:
    """Generate a UUID4 string."""
    return str(uuid.uuid4())


def new_item_id(kind: ItemKind) -> str:
    """Generate a store-unique item id, prefixed with the item kind."""
    return f"{kind.value}-{new_uuid()}"
