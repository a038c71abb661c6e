"""Deadline checks at day granularity.

Both sides are reduced to calendar dates before comparing, so a deadline of
today is never overdue regardless of the time of day.
"""

from datetime import date
from typing import Optional, Union

from tasktrack.models.dates import local_today, parse_date

DateLike = Union[date, str]


def _as_date(value: DateLike, name: str) -> date:
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"{name} is not a date: {value!r}")
    return parsed


def is_overdue(deadline: DateLike, today: Optional[DateLike] = None) -> bool:
    """True if the deadline is strictly before today.

    Args:
        deadline: Deadline date or `YYYY-MM-DD` string
        today: Reference date (defaults to the local date)
    """
    reference = _as_date(today, "today") if today is not None else local_today()
    return _as_date(deadline, "deadline") < reference


def days_until(deadline: DateLike, today: Optional[DateLike] = None) -> int:
    """Whole days from today to the deadline (0 today, negative when past)."""
    reference = _as_date(today, "today") if today is not None else local_today()
    return (_as_date(deadline, "deadline") - reference).days
