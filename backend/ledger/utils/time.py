from datetime import date, datetime
from zoneinfo import ZoneInfo


def to_calendar_date(value: date | datetime, tz: ZoneInfo) -> date:
    """Calendar date of `value` as seen in `tz`. Plain dates pass through."""
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return value.astimezone(tz).date()


def local_midnight(year: int, month: int, day: int, tz: ZoneInfo) -> datetime:
    return datetime(year, month, day, tzinfo=tz)
