"""Result model for manager commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional


CommandStatus = Literal["success", "failed"]


@dataclass(slots=True)
class CommandResult:
    """Structured outcome of one command: a value on success, an error kind otherwise."""

    command: str
    status: CommandStatus

    value: Any = None

    error_type: Optional[str] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None
    error_details: Optional[dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"
