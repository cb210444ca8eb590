"""Helpers for normalizing calendar dates and datetimes on the time axis."""

from datetime import date, datetime, time, timezone


def as_naive_datetime(value: date | datetime) -> datetime:
    """
    Normalize a date or datetime to a naive datetime.

    Plain dates become midnight of that day. Timezone-aware datetimes are
    converted to UTC before the tzinfo is dropped, so they compare cleanly
    with the naive units of a timeline window.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date | datetime) -> datetime:
    return datetime.combine(as_naive_datetime(value).date(), time.min)
