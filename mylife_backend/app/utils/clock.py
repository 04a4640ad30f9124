# mylife_backend/app/utils/clock.py
from __future__ import annotations

from datetime import date, datetime, timezone

def now_iso() -> str:
    """UTC now as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()

def date_iso(d: date | None) -> str | None:
    # datetime is a date subclass; keep only the calendar part
    if d is None:
        return None
    if isinstance(d, datetime):
        d = d.date()
    return d.isoformat()

def datetime_iso(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.isoformat().replace("+00:00", "Z")
