"""
Date utilities.

BOT periods are ISO strings: ``YYYY-MM-DD`` for daily series, ``YYYY-MM``
or ``YYYY-QN`` for coarser ones. Only the daily form parses as a date.
"""

from datetime import date, datetime, timedelta
from typing import Any, Iterator

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: Any) -> date:
    """
    Parse a daily period into a date.

    Raises:
        ValueError: not a ``YYYY-MM-DD`` string
    """
    if not isinstance(value, str):
        raise ValueError(f"Not a date string: {value!r}")
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def days_between(start: date, end: date) -> int:
    """Inclusive day count."""
    return (end - start).days + 1
