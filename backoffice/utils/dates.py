import datetime as dt
from typing import Optional


def utcnow() -> dt.datetime:
    """Current time as a naive datetime in UTC."""
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


def normalize_dt(value: Optional[dt.datetime]) -> Optional[dt.datetime]:
    """Normalizes to a naive datetime in UTC."""
    if value is None:
        return None
    # Aware values are moved to UTC and stripped; naive ones are assumed UTC already
    if value.tzinfo is not None:
        return value.astimezone(dt.timezone.utc).replace(tzinfo=None)
    return value


def blank_to_none(value):
    # Blank date inputs arrive as ""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def same_month(value: Optional[dt.datetime], reference: dt.datetime) -> bool:
    if value is None:
        return False
    return value.year == reference.year and value.month == reference.month


def date_only_to_datetime(value):
    """Plain dates ("2024-03-01") become noon of that day, so a timezone shift keeps the day."""
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            try:
                value = dt.date.fromisoformat(text)
            except ValueError:
                return value
    if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
        return dt.datetime.combine(value, dt.time(12, 0, 0))
    return value
