"""Date manipulation utilities"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware current UTC time"""
    return datetime.now(timezone.utc)


def isoformat_utc(moment: datetime | None = None) -> str:
    """ISO-8601 string for storing timestamps inside JSON documents"""
    return (moment or utcnow()).isoformat()
