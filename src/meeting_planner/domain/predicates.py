"""Filters over meetings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from meeting_planner.core.clock import IClock, WallClock
from meeting_planner.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from meeting_planner.core.config import Settings
    from meeting_planner.domain.meeting import Meeting


class MeetingWithinHoursPredicate:
    """Matches meetings that have not started yet and start within *hours*.

    Partial hours are truncated, so with ``hours=2`` a meeting 2h59m away
    still matches.
    """

    def __init__(self, hours: int, clock: IClock | None = None) -> None:
        if hours < 0:
            raise InvalidArgumentError(f"Look-ahead hours must not be negative: {hours}")
        self.hours = hours
        self._clock = clock or WallClock()

    @classmethod
    def from_settings(
        cls, settings: Settings, clock: IClock | None = None
    ) -> MeetingWithinHoursPredicate:
        return cls(settings.reminders.window_hours, clock)

    def __call__(self, meeting: Meeting) -> bool:
        now = self._clock.now()
        start = meeting.date_time.value
        if start < now:
            return False
        whole_hours = int((start - now).total_seconds() // 3600)
        return whole_hours <= self.hours

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, MeetingWithinHoursPredicate):
            return NotImplemented
        return self.hours == other.hours

    def __hash__(self) -> int:
        return hash(self.hours)
