"""Typed drag-and-drop payload (validated at the transport boundary)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from vfsmgr.errors import InvalidArgumentError

from .actions import DragAction


@dataclass(frozen=True)
class DragPayload:
    """
    Items being dragged and what dropping them should do.

    This is an explicit-field model; untyped transport data goes through
    from_dict/from_json before it reaches the store.
    """

    item_ids: tuple[str, ...]
    action: DragAction = DragAction.MOVE

    def validate_required_fields(self) -> None:
        """Raises ValueError if the payload cannot be applied."""
        if not self.item_ids:
            raise ValueError("Missing required field: item_ids")
        for item_id in self.item_ids:
            if not isinstance(item_id, str) or not item_id.strip():
                raise ValueError(f"Invalid item id: {item_id!r}")
        if not isinstance(self.action, DragAction):
            raise ValueError(f"Unsupported action: {self.action!r}")

    @classmethod
    def from_dict(cls, data: Any) -> DragPayload:
        """
        Build a payload from decoded transport data.

        Accepts {"itemIds": [...], "action": "move"|"copy"}; "item_ids" is
        accepted as an alias. A missing action means move.

        Raises:
            InvalidArgumentError: if the shape or any value is invalid.
        """
        if not isinstance(data, dict):
            raise InvalidArgumentError("Drag payload must be an object")

        raw_ids = data.get("itemIds", data.get("item_ids"))
        if not isinstance(raw_ids, list):
            raise InvalidArgumentError("Drag payload itemIds must be a list")

        try:
            action = DragAction(data.get("action", DragAction.MOVE.value))
        except ValueError as exc:
            raise InvalidArgumentError(
                "Unsupported drag action",
                details={"action": data.get("action")},
                cause=exc,
            ) from exc

        payload = cls(item_ids=tuple(raw_ids), action=action)
        try:
            payload.validate_required_fields()
        except ValueError as exc:
            raise InvalidArgumentError(str(exc), cause=exc) from exc
        return payload

    @classmethod
    def from_json(cls, text: str) -> DragPayload:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("Drag payload is not valid JSON", cause=exc) from exc
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return {"itemIds": list(self.item_ids), "action": self.action.value}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
