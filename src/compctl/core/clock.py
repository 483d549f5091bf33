# This project was developed with assistance from AI tools.
"""Injectable "today" for the evaluators.

A clock is any zero-argument callable returning a ``date``. Evaluators take
one as a parameter so tests can pin the current day without patching time.
"""

from collections.abc import Callable
from datetime import date

Clock = Callable[[], date]


def system_clock() -> date:
    """Return the local calendar date."""
    return date.today()


def fixed_clock(day: date) -> Clock:
    """Return a clock that always reports ``day``."""

    def _clock() -> date:
        return day

    return _clock
