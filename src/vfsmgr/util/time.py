from __future__ import annotations

from datetime import datetime, timezone


def now_utc() -> datetime:
    """Return current time as tz-aware UTC datetime."""
    return datetime.now(timezone.utc)


def normalize_dt(dt: datetime) -> datetime:
    """Ensure datetime is tz-aware. Raises if naive."""
    if not isinstance(dt, datetime):
        raise TypeError("dt must be a datetime")
    if dt.tzinfo is None:
        raise ValueError("naive datetime is not allowed; timezone-aware required")
    return dt
