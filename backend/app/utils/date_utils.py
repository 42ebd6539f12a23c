"""
Local-time helpers.

Timestamps are stored naive in the service's configured zone (a fixed UTC
offset, UTC+8 by default). The calendar day derived here is both the dedup
key for submissions and the grouping key of the listing.
"""

from datetime import date, datetime, timedelta, timezone

from app.config import settings

LOCAL_TZ = timezone(timedelta(hours=settings.TZ_OFFSET_HOURS))

DAY_FORMAT = "%Y-%m-%d"


def get_local_now() -> datetime:
    return datetime.now(LOCAL_TZ).replace(tzinfo=None)


def get_local_today() -> date:
    return get_local_now().date()


def day_key(value: datetime) -> str:
    """
    Format a timestamp as its "YYYY-MM-DD" day key.

    Args:
        value: A naive local datetime (or date)

    Returns:
        The day key string, e.g. "2024-12-14"
    """
    return value.strftime(DAY_FORMAT)
