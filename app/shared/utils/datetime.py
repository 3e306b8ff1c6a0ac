"""
UTC datetime and calendar-date utilities.

All instants in the system are timezone-aware UTC. Document validity is
tracked per calendar day, so "now" is reduced to a UTC date before any
comparison with valid_from / valid_until.
"""

from datetime import UTC, date, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def to_utc_date(moment: datetime | date) -> date:
    """
    Return the UTC calendar day of an instant.

    A plain date is returned unchanged; a naive datetime is taken as UTC.

    Args:
        moment: Instant or calendar day

    Returns:
        The calendar date in UTC
    """
    if isinstance(moment, datetime):
        aware = ensure_utc(moment)
        assert aware is not None
        return aware.date()
    return moment


def parse_date(value: date | datetime | str | None) -> date | None:
    """
    Parse a stored date value into a calendar date.

    Accepts date, datetime (reduced to its UTC day), ISO 8601 strings
    ("2024-01-31", "2024-01-31T00:00:00+00:00", trailing "Z") or None /
    blank strings (no date).

    Args:
        value: Raw value from the data store

    Returns:
        The calendar date, or None when no date is set

    Raises:
        ValueError: If the value is present but not a recognizable date
    """
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return to_utc_date(value)
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value type: {type(value).__name__}")
    text = value.strip()
    if not text:
        return None
    if "T" in text or " " in text:
        return to_utc_date(datetime.fromisoformat(text))
    return date.fromisoformat(text)


def format_display_date(value: date) -> str:
    """
    Format a date the way the checklist shows it (day.month.year, no padding).

    Args:
        value: Calendar date

    Returns:
        String such as "5.1.2024"
    """
    return f"{value.day}.{value.month}.{value.year}"
