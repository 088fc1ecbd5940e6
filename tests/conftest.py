"""Shared fixtures for the meeting-planner test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

import pytest

from meeting_planner.core.clock import SimClock
from meeting_planner.core.enums import Recurrence
from meeting_planner.core.ids import new_participant_id
from meeting_planner.domain.meeting import Meeting
from meeting_planner.domain.values import DateTime, Duration, Location, Title


@dataclass(frozen=True)
class Contact:
    """Minimal stand-in for a contact-book person record."""

    name: str
    uuid: UUID = field(default_factory=new_participant_id)


# ---------------------------------------------------------------------------
# Participants
# ---------------------------------------------------------------------------

@pytest.fixture
def alice() -> Contact:
    return Contact("Alice", UUID("11111111-1111-4111-8111-111111111111"))


@pytest.fixture
def bob() -> Contact:
    return Contact("Bob", UUID("22222222-2222-4222-8222-222222222222"))


@pytest.fixture
def make_contact():
    """Factory for contacts with fresh identifiers."""

    def _make(name: str = "Carol") -> Contact:
        return Contact(name)

    return _make


# ---------------------------------------------------------------------------
# Meetings
# ---------------------------------------------------------------------------

@pytest.fixture
def make_meeting():
    """Factory that builds a valid meeting, overriding any field by keyword."""

    def _make(**overrides) -> Meeting:
        fields = {
            "title": Title("Sprint planning"),
            "duration": Duration(1, 30),
            "date_time": DateTime(datetime(2024, 1, 1, 10, 0)),
            "location": Location("Room 4B"),
            "recurrence": Recurrence.NONE,
            "participants": set(),
        }
        fields.update(overrides)
        return Meeting(**fields)

    return _make


@pytest.fixture
def one_off_meeting(make_meeting, alice, bob) -> Meeting:
    """A non-recurring meeting with two participants."""
    return make_meeting(participants={alice.uuid, bob.uuid})


@pytest.fixture
def weekly_meeting(make_meeting, alice) -> Meeting:
    """A weekly stand-up starting Monday 2024-01-01 10:00."""
    return make_meeting(
        title=Title("Weekly sync"),
        recurrence=Recurrence.WEEKLY,
        participants={alice.uuid},
    )


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def sim_clock() -> SimClock:
    """Return a SimClock starting at 2024-06-01 09:00 local time."""
    return SimClock(start=datetime(2024, 6, 1, 9, 0))
