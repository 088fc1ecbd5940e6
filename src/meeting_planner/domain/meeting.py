"""Meeting aggregate root.

A Meeting bundles validated value objects with the set of participants
attending it.  After construction the only thing that may change is the
participant set; every other field is fixed for the meeting's lifetime.

Participants are held by identifier only.  The person records they refer
to belong to the contact book and are resolved there.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from uuid import UUID

from meeting_planner.core.enums import Recurrence
from meeting_planner.core.errors import InvalidArgumentError, NullFieldError
from meeting_planner.core.ids import ordered_ids, parse_participant_id
from meeting_planner.core.interfaces import IParticipant, IPositionalIndex
from meeting_planner.domain.values import DateTime, Duration, Location, Title
from meeting_planner.observability.logger import get_logger

logger = get_logger(__name__)

# Number of occurrences materialised for a recurring meeting.
OCCURRENCE_COUNT = 5


class Meeting:
    """A scheduled meeting.

    Identity fields are ``title`` and ``date_time`` (see ``is_same_meeting``);
    ``__eq__`` compares every field.

    Parameters
    ----------
    title, duration, date_time, recurrence, participants :
        Required.  ``None`` raises ``NullFieldError``.
    location :
        Optional; ``None`` for a meeting without a venue.
    """

    def __init__(
        self,
        title: Title,
        duration: Duration,
        date_time: DateTime,
        location: Location | None,
        recurrence: Recurrence,
        participants: Iterable[UUID | str],
    ) -> None:
        _require(title, "title", Title)
        _require(duration, "duration", Duration)
        _require(date_time, "date_time", DateTime)
        _require(recurrence, "recurrence", Recurrence)
        if participants is None:
            raise NullFieldError("participants")
        if location is not None and not isinstance(location, Location):
            raise InvalidArgumentError(
                f"Meeting location must be a Location, got {type(location).__name__}"
            )

        self._title = title
        self._duration = duration
        self._date_time = date_time
        self._location = location
        self._recurrence = recurrence
        try:
            self._participants: set[UUID] = {
                parse_participant_id(p) for p in participants
            }
        except ValueError as exc:
            raise InvalidArgumentError(f"Invalid participant id: {exc}") from exc

    @classmethod
    def without_location(
        cls,
        title: Title,
        duration: Duration,
        date_time: DateTime,
        recurrence: Recurrence,
        participants: Iterable[UUID | str],
    ) -> Meeting:
        """Create a meeting that has no location."""
        return cls(title, duration, date_time, None, recurrence, participants)

    # ------------------------------------------------------------------ #
    # Accessors                                                            #
    # ------------------------------------------------------------------ #

    @property
    def title(self) -> Title:
        return self._title

    @property
    def duration(self) -> Duration:
        return self._duration

    @property
    def date_time(self) -> DateTime:
        return self._date_time

    @property
    def location(self) -> Location | None:
        return self._location

    @property
    def recurrence(self) -> Recurrence:
        return self._recurrence

    @property
    def participants(self) -> frozenset[UUID]:
        return self.get_participants()

    def get_title(self) -> Title:
        return self._title

    def get_duration(self) -> Duration:
        return self._duration

    def get_date_time(self) -> DateTime:
        return self._date_time

    def get_location(self) -> Location | None:
        return self._location

    def get_recurrence(self) -> Recurrence:
        return self._recurrence

    def get_participants(self) -> frozenset[UUID]:
        """Return an immutable snapshot of the participant ids.

        The snapshot has no mutating methods, so ``add``/``remove`` on it
        raise ``AttributeError``.  Later changes to the meeting are not
        reflected in a snapshot taken earlier.
        """
        return frozenset(self._participants)

    # ------------------------------------------------------------------ #
    # Queries                                                              #
    # ------------------------------------------------------------------ #

    def get_recurrence_occurrences(self) -> list[Meeting]:
        """Return the upcoming occurrences of this meeting.

        A one-off meeting yields ``[self]``.  A recurring one yields
        ``OCCURRENCE_COUNT`` new meetings, the first at this meeting's own
        time and each later one a recurrence period after the previous.
        """
        if self._recurrence is Recurrence.NONE:
            return [self]

        occurrences = [
            Meeting(
                self._title,
                self._duration,
                self._date_time.next_occurrence(self._recurrence, i),
                self._location,
                self._recurrence,
                set(self._participants),
            )
            for i in range(OCCURRENCE_COUNT)
        ]
        logger.debug(
            "meeting.occurrences_expanded",
            title=self._title.value,
            recurrence=self._recurrence.value,
            count=len(occurrences),
        )
        return occurrences

    def is_same_recurring_meeting(self, other: Meeting | None) -> bool:
        """True if both meetings belong to the same recurrence plan."""
        if other is self:
            return True
        return (
            other is not None
            and other.title == self._title
            and other.recurrence is self._recurrence
        )

    def is_same_meeting(self, other: Meeting | None) -> bool:
        """True if both meetings share title and date-time.

        This is a weaker notion of equality than ``==``, used to detect
        duplicates.
        """
        if other is self:
            return True
        return (
            other is not None
            and other.title == self._title
            and other.date_time == self._date_time
        )

    def is_future_meeting(self, now: datetime) -> bool:
        """True if the meeting starts strictly after *now*."""
        return self._date_time.is_after(now)

    # ------------------------------------------------------------------ #
    # Participant mutation                                                 #
    # ------------------------------------------------------------------ #

    def add_participant(self, person: IParticipant) -> None:
        """Add *person* by identifier.  Adding twice is a no-op."""
        self._participants.add(person.uuid)
        logger.debug("meeting.participant_added", title=self._title.value)

    def del_participant(self, index: IPositionalIndex) -> None:
        """Remove the participant at *index* in the id-ordered listing.

        The caller must supply an index below the participant count; any
        other value is a programming error.
        """
        listing = ordered_ids(self._participants)
        position = index.zero_based
        assert 0 <= position < len(listing), "index is invalid"
        self._participants.remove(listing[position])
        logger.debug(
            "meeting.participant_removed", title=self._title.value, position=position
        )

    def delete_participant(self, person: IParticipant) -> None:
        """Remove *person* if present."""
        self._participants.discard(person.uuid)

    # ------------------------------------------------------------------ #
    # Value semantics                                                      #
    # ------------------------------------------------------------------ #

    def copy(self) -> Meeting:
        """Return a fully independent deep copy."""
        return Meeting(
            self._title.copy(),
            self._duration.copy(),
            self._date_time.copy(),
            self._location.copy() if self._location is not None else None,
            self._recurrence.copy(),
            set(self._participants),
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Meeting):
            return NotImplemented
        return (
            other.title == self._title
            and other.duration == self._duration
            and other.date_time == self._date_time
            and other.location == self._location
            and other.get_participants() == self.get_participants()
            and other.recurrence is self._recurrence
        )

    def __hash__(self) -> int:
        return hash(
            (
                self._title,
                self._date_time,
                self._duration,
                self._location,
                self._recurrence,
                frozenset(self._participants),
            )
        )

    def __str__(self) -> str:
        participants = "".join(str(p) for p in ordered_ids(self._participants))
        return (
            f"{self._title} Date and Time: {self._date_time}"
            f" Duration: {self._duration}"
            f" Location: {self._location}"
            f" Recurrence: {self._recurrence}"
            f" Participants: {participants}"
        )

    def __repr__(self) -> str:
        return (
            f"Meeting(title={self._title.value!r}, date_time={self._date_time.value.isoformat()!r}, "
            f"recurrence={self._recurrence.value}, participants={len(self._participants)})"
        )


def _require(value: object, name: str, kind: type) -> None:
    if value is None:
        raise NullFieldError(name)
    if not isinstance(value, kind):
        raise InvalidArgumentError(
            f"Meeting {name} must be a {kind.__name__}, got {type(value).__name__}"
        )
