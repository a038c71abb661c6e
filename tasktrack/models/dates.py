"""Date helpers shared by the decoder, the store and the view engine.

Calendar dates travel as `YYYY-MM-DD` strings in storage and as `date`
objects everywhere else. Timestamps are always timezone-aware UTC.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def local_today() -> date:
    """Today's calendar date in the local timezone."""
    return date.today()


def parse_date(value: Any) -> Optional[date]:
    """Coerce a value into a calendar date.

    Accepts `date`, `datetime` (date part) and ISO strings. A full ISO
    date-time string keeps only its date part. Anything else, including
    empty strings, gives None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) < 10:
        return None
    if len(text) > 10 and text[10] not in "T ":
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Coerce a value into an aware UTC datetime.

    Strings are read as ISO-8601 (a trailing `Z` is accepted), numbers as
    epoch milliseconds. Naive values are assumed to be UTC. Returns None
    when the value cannot be read.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, bool):
        return None
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    return to_utc(parsed)


def to_utc(value: datetime) -> Optional[datetime]:
    """Normalize to aware UTC; naive values are taken as UTC.

    Returns None when the shifted instant falls outside the datetime range
    (e.g. `0001-01-01T00:00:00+01:00`).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def format_timestamp(value: datetime) -> str:
    """ISO-8601 form used in storage (`...Z` for UTC)."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
