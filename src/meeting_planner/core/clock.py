"""Clock abstraction for time-dependent meeting queries.

WallClock: the machine's local time (meetings are scheduled in local time)
SimClock: deterministic time for tests and replays

Predicates never call datetime.now() directly; they take a clock.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol


class IClock(Protocol):
    """Clock interface used by all time-dependent code."""

    def now(self) -> datetime:
        """Current time as a naive local datetime."""
        ...


class WallClock:
    """Real wall-clock time."""

    def now(self) -> datetime:
        return datetime.now()


class SimClock:
    """Simulated clock.

    Time advances only when explicitly set.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._time = start or datetime(2024, 1, 1)

    def now(self) -> datetime:
        return self._time

    def set_time(self, t: datetime) -> None:
        """Move the clock. Must be monotonically increasing."""
        if t < self._time:
            raise ValueError(
                f"SimClock cannot go backwards: {t} < {self._time}"
            )
        self._time = t

    def advance(self, **kwargs: float) -> None:
        """Advance time by a ``timedelta(**kwargs)``."""
        self.set_time(self._time + timedelta(**kwargs))
