"""Public session exports for vfsmgr."""

from __future__ import annotations

from .explorer_session import ExplorerSession

__all__ = ["ExplorerSession"]
