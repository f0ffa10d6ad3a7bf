"""Temporal key helpers normalizing dates to month granularity."""

from collections.abc import Iterator
from datetime import date, datetime

from tally_budget.domain.errors import LedgerInvariantError
from tally_budget.domain.models import MonthKey

MonthLike = date | datetime | MonthKey


def month_key(value: MonthLike) -> MonthKey:
    """Return the canonical month key for a date or key.

    Args:
        value: Date, datetime or an existing key.

    Returns:
        MonthKey: Key of the month containing ``value``.
    """
    if isinstance(value, MonthKey):
        return value
    if isinstance(value, (date, datetime)):
        return MonthKey.from_date(value)
    raise LedgerInvariantError(f"Cannot derive a month from {value!r}")


def calendar_day(value: date | datetime) -> date:
    """Drop the time part of a datetime so stored dates stay plain days."""
    if isinstance(value, datetime):
        return value.date()
    return value


def same_month(first: MonthLike, second: MonthLike) -> bool:
    """Return True when both values fall in the same calendar month."""
    return month_key(first) == month_key(second)


def previous_month(value: MonthLike) -> MonthKey:
    """Return the month immediately preceding ``value``'s month."""
    return month_key(value).previous()


def next_month(value: MonthLike) -> MonthKey:
    """Return the month immediately following ``value``'s month."""
    return month_key(value).next()


def iter_months(start: MonthLike, stop: MonthLike) -> Iterator[MonthKey]:
    """Yield months from ``start`` (inclusive) to ``stop`` (exclusive)."""
    current = month_key(start)
    end = month_key(stop)
    while current < end:
        yield current
        current = current.next()


__all__ = [
    "MonthLike",
    "calendar_day",
    "month_key",
    "same_month",
    "previous_month",
    "next_month",
    "iter_months",
]
