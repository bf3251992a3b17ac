"""Date helpers shared by the models and the API layer.

All timestamps are stored as naive UTC datetimes.
"""
from datetime import datetime, timedelta, UTC
from typing import Optional

DUE_SOON_WINDOW = timedelta(hours=24)


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize an incoming datetime to naive UTC (naive input is assumed UTC)."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def due_date_status(due_date: Optional[datetime], now: Optional[datetime] = None) -> Optional[str]:
    """Return "overdue", "due_soon" (within 24 hours) or "normal"; None without a due date."""
    if due_date is None:
        return None
    now = now or utcnow()
    remaining = due_date - now
    if remaining < timedelta(0):
        return "overdue"
    if remaining < DUE_SOON_WINDOW:
        return "due_soon"
    return "normal"
