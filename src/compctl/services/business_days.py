# This project was developed with assistance from AI tools.
"""Business-day arithmetic.

Pure date math over ``datetime.date``. Saturday and Sunday are the only
non-business days; holidays are out of scope.
"""

from datetime import date, timedelta

_ONE_DAY = timedelta(days=1)


def _is_business_day(day: date) -> bool:
    return day.weekday() < 5  # Mon-Fri


def add_business_days(day: date, n: int) -> date:
    """Return the date ``n`` business days after ``day``.

    Weekends are stepped over and never returned for ``n >= 1``. With
    ``n == 0`` the input comes back unchanged, even on a weekend.
    """
    result = day
    added = 0
    while added < n:
        result += _ONE_DAY
        if _is_business_day(result):
            added += 1
    return result


def subtract_business_days(day: date, n: int) -> date:
    """Return the date ``n`` business days before ``day``."""
    result = day
    subtracted = 0
    while subtracted < n:
        result -= _ONE_DAY
        if _is_business_day(result):
            subtracted += 1
    return result


def business_days_between(start: date, end: date) -> int:
    """Count weekdays in the half-open interval ``[start, end)``.

    Returns 0 when ``start >= end``.
    """
    count = 0
    current = start
    while current < end:
        if _is_business_day(current):
            count += 1
        current += _ONE_DAY
    return count


def business_days_until(today: date, deadline: date) -> int:
    """Signed business days remaining before ``deadline``.

    Zero on the deadline itself, negative once it has passed.
    """
    if today <= deadline:
        return business_days_between(today, deadline)
    return -business_days_between(deadline, today)
