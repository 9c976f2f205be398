"""
UTC time helpers

Timestamps are stored timezone-aware. SQLite hands them back naive, so
anything comparing stored values goes through as_utc.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime

# Column type for every timestamp column
UTCDateTime = DateTime(timezone=True)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive values are taken to be UTC; aware values are converted"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
