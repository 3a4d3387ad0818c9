"""
Business‑day arithmetic.

A business day is any calendar day that is neither a Saturday, a
Sunday nor one of the fixed holidays (New Year's Day and Christmas
Day).  The holiday table is derived from the year of the date being
tested, so a walk that crosses January 1 checks each day against the
holidays of its own year.
"""

from datetime import date, timedelta
from typing import FrozenSet

SATURDAY = 5
SUNDAY = 6

# (month, day) pairs observed every year.
FIXED_HOLIDAYS = (
    (1, 1),  # New Year's Day
    (12, 25),  # Christmas Day
)


def holidays_for_year(year: int) -> FrozenSet[date]:
    """Return the holidays observed in ``year``."""
    return frozenset(date(year, month, day) for month, day in FIXED_HOLIDAYS)


def is_holiday(day: date) -> bool:
    return day in holidays_for_year(day.year)


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def is_business_day(day: date) -> bool:
    return not (is_weekend(day) or is_holiday(day))


def business_days_cutoff(days: int, reference: date) -> date:
    """Walk back ``days`` business days from ``reference``.

    The walk starts on the day before ``reference`` (the reference day
    itself is never counted) and stops on the ``days``‑th business day
    reached.  ``days == 0`` returns ``reference`` unchanged.

    >>> business_days_cutoff(5, date(2024, 1, 8))
    datetime.date(2023, 12, 29)

    Raises
    ------
    ValueError
        If ``days`` is negative, or if the walk would pass ``date.min``.
    """
    if days < 0:
        raise ValueError(f"days must not be negative, got {days}")
    if days > (reference - date.min).days:
        raise ValueError(f"{days} business days before {reference} is out of the calendar range")

    current = reference
    counted = 0
    while counted < days:
        if current == date.min:
            raise ValueError(f"{days} business days before {reference} is out of the calendar range")
        current -= timedelta(days=1)
        if is_business_day(current):
            counted += 1
    return current
