"""Tests for MeetingWithinHoursPredicate."""

from datetime import datetime

import pytest

from meeting_planner.core.config import Settings
from meeting_planner.core.errors import InvalidArgumentError
from meeting_planner.domain.predicates import MeetingWithinHoursPredicate
from meeting_planner.domain.values import DateTime


def _at(make_meeting, *args):
    return make_meeting(date_time=DateTime(datetime(*args)))


class TestWithinHours:
    def test_meeting_inside_window(self, make_meeting, sim_clock):
        predicate = MeetingWithinHoursPredicate(2, clock=sim_clock)
        assert predicate(_at(make_meeting, 2024, 6, 1, 10, 0))

    def test_partial_hours_are_truncated(self, make_meeting, sim_clock):
        predicate = MeetingWithinHoursPredicate(2, clock=sim_clock)
        assert predicate(_at(make_meeting, 2024, 6, 1, 11, 59))
        assert not predicate(_at(make_meeting, 2024, 6, 1, 12, 0))

    def test_meeting_starting_now_matches(self, make_meeting, sim_clock):
        predicate = MeetingWithinHoursPredicate(0, clock=sim_clock)
        assert predicate(_at(make_meeting, 2024, 6, 1, 9, 0))

    def test_past_meeting_never_matches(self, make_meeting, sim_clock):
        predicate = MeetingWithinHoursPredicate(1000, clock=sim_clock)
        assert not predicate(_at(make_meeting, 2024, 6, 1, 8, 59))

    def test_follows_the_clock(self, make_meeting, sim_clock):
        predicate = MeetingWithinHoursPredicate(1, clock=sim_clock)
        meeting = _at(make_meeting, 2024, 6, 1, 15, 0)
        assert not predicate(meeting)
        sim_clock.advance(hours=5)
        assert predicate(meeting)

    def test_usable_as_filter(self, make_meeting, sim_clock):
        meetings = [
            _at(make_meeting, 2024, 6, 1, 8, 0),
            _at(make_meeting, 2024, 6, 1, 9, 30),
            _at(make_meeting, 2024, 6, 3, 9, 30),
        ]
        predicate = MeetingWithinHoursPredicate(24, clock=sim_clock)
        assert list(filter(predicate, meetings)) == [meetings[1]]

    def test_negative_hours_rejected(self):
        with pytest.raises(InvalidArgumentError):
            MeetingWithinHoursPredicate(-1)


class TestFromSettings:
    def test_window_from_settings(self, sim_clock):
        settings = Settings(reminders={"window_hours": 6})
        predicate = MeetingWithinHoursPredicate.from_settings(settings, sim_clock)
        assert predicate.hours == 6


class TestEquality:
    def test_equal_by_hours(self):
        assert MeetingWithinHoursPredicate(3) == MeetingWithinHoursPredicate(3)
        assert MeetingWithinHoursPredicate(3) != MeetingWithinHoursPredicate(4)
        assert hash(MeetingWithinHoursPredicate(3)) == hash(MeetingWithinHoursPredicate(3))
