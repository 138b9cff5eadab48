"""
Time helpers: aware "now" and normalization of naive datetimes.
"""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from app.config import get_settings


def local_tz() -> tzinfo:
    """Zone configured by TIMEZONE."""
    return ZoneInfo(get_settings().TIMEZONE)


def now() -> datetime:
    return datetime.now(local_tz())


def ensure_aware(value: datetime | None) -> datetime | None:
    """Interpret naive datetimes in the configured zone; aware ones pass through."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=local_tz())
