"""Property tests: meeting value rules, recurrence expansion and storage round trip.

Uses hypothesis to verify that
- any whole-hour/0-59 minute pair is a valid Duration and anything past 59 is not,
- a recurring meeting always expands to five strictly increasing occurrences
  a fixed period apart (daily/weekly),
- ``MeetingRecord.from_meeting(m).to_meeting() == m`` for every meeting the
  stored date form can hold, and encoding refuses the rest.
"""

from datetime import datetime, timedelta

import pytest
from hypothesis import given, settings, strategies as st

from meeting_planner.core.enums import Recurrence
from meeting_planner.core.errors import IllegalValueError, InvalidArgumentError
from meeting_planner.domain.meeting import Meeting
from meeting_planner.domain.values import DateTime, Duration, Location, Title
from meeting_planner.storage.meeting_record import MeetingRecord

_text = st.from_regex(r"[A-Za-z0-9][A-Za-z0-9 ,.'&()-]{0,40}", fullmatch=True)

# Wider than the 2000-2099 span the stored two-digit year can hold.
_moments = st.datetimes(
    min_value=datetime(1900, 1, 1),
    max_value=datetime(2200, 12, 31, 23, 59),
)

meetings = st.builds(
    Meeting,
    title=_text.map(Title),
    duration=st.builds(
        Duration,
        hours=st.integers(min_value=0, max_value=1_000),
        minutes=st.integers(min_value=0, max_value=59),
    ),
    date_time=_moments.map(DateTime),
    location=_text.map(Location),
    recurrence=st.sampled_from(list(Recurrence)),
    participants=st.sets(st.uuids(), max_size=6),
)


@given(
    hours=st.integers(min_value=0, max_value=10**6),
    minutes=st.integers(min_value=0, max_value=59),
)
def test_duration_accepts_any_minute_within_the_hour(hours, minutes):
    d = Duration(hours, minutes)
    assert (d.hours, d.minutes) == (hours, minutes)


@given(
    hours=st.integers(min_value=0, max_value=10**6),
    minutes=st.integers(min_value=60, max_value=10**6),
)
def test_duration_rejects_minutes_past_59(hours, minutes):
    with pytest.raises(InvalidArgumentError):
        Duration(hours, minutes)


@given(meeting=meetings)
@settings(max_examples=200)
def test_record_round_trip_or_refusal(meeting):
    if not meeting.date_time.is_storable():
        with pytest.raises(IllegalValueError):
            MeetingRecord.from_meeting(meeting)
        return
    restored = MeetingRecord.from_meeting(meeting).to_meeting()
    assert restored == meeting
    assert restored.is_same_meeting(meeting)


@given(meeting=meetings.filter(lambda m: m.date_time.is_storable()))
def test_record_round_trip_through_dict(meeting):
    data = MeetingRecord.from_meeting(meeting).to_dict()
    assert MeetingRecord.from_dict(data).to_meeting() == meeting


@given(
    base=st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2090, 1, 1)),
    recurrence=st.sampled_from(
        [Recurrence.DAILY, Recurrence.WEEKLY, Recurrence.MONTHLY, Recurrence.YEARLY]
    ),
)
def test_occurrences_strictly_increase(base, recurrence):
    meeting = Meeting(
        Title("Series"), Duration(1, 0), DateTime(base), Location("HQ"), recurrence, set()
    )
    occurrences = meeting.get_recurrence_occurrences()
    assert len(occurrences) == 5
    assert occurrences[0].date_time == meeting.date_time
    times = [o.date_time for o in occurrences]
    assert all(a < b for a, b in zip(times, times[1:]))
    assert all(o.is_same_recurring_meeting(meeting) for o in occurrences)


@given(
    base=st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2090, 1, 1)),
    recurrence=st.sampled_from([Recurrence.DAILY, Recurrence.WEEKLY]),
)
def test_fixed_period_spacing(base, recurrence):
    period = timedelta(days=1) if recurrence is Recurrence.DAILY else timedelta(days=7)
    meeting = Meeting(
        Title("Series"), Duration(0, 15), DateTime(base), None, recurrence, set()
    )
    times = [o.date_time.value for o in meeting.get_recurrence_occurrences()]
    assert all(b - a == period for a, b in zip(times, times[1:]))


@given(meeting=meetings.filter(lambda m: m.recurrence is Recurrence.NONE))
def test_one_off_expands_to_itself(meeting):
    assert meeting.get_recurrence_occurrences() == [meeting]
