"""Persisted form of a :class:`Meeting`.

A ``MeetingRecord`` is a flat, JSON-friendly record of six fields:

==============  =====================================================
field           encoding
==============  =====================================================
title           raw validated text
duration        ``"<hours> <minutes>"``
dateTime        ``d/M/yy HHmm`` (e.g. ``15/3/24 1430``)
location        raw validated text
recurrence      variant name; absent means ``NONE``
participants    list of participant UUID strings; absent means none
==============  =====================================================

Decoding (``to_meeting``) re-validates every field in the order above and
stops at the first violation with an ``IllegalValueError`` naming it.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from meeting_planner.core.enums import Recurrence
from meeting_planner.core.errors import (
    DateTimeParseError,
    IllegalValueError,
    InvalidArgumentError,
)
from meeting_planner.core.ids import ordered_ids, parse_participant_id
from meeting_planner.domain.meeting import Meeting
from meeting_planner.domain.values import DateTime, Duration, Location, Title
from meeting_planner.observability.logger import get_logger

logger = get_logger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "Meeting's %s field is missing!"
PARSE_ERROR_MESSAGE_FORMAT = "Meeting's %s was incorrectly saved in the data file"

# Stored key -> field name used in error messages.
_FIELD_NAMES = {
    "title": Title.__name__,
    "duration": Duration.__name__,
    "dateTime": DateTime.__name__,
    "date_time": DateTime.__name__,
    "location": Location.__name__,
    "recurrence": Recurrence.__name__,
    "participants": "Participants",
}


class MeetingRecord(BaseModel):
    """Storage-friendly version of a :class:`Meeting`."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    title: str | None = None
    duration: str | None = None
    date_time: str | None = Field(default=None, alias="dateTime")
    location: str | None = None
    recurrence: str | None = None
    participants: list[str] | None = None

    # ------------------------------------------------------------------ #
    # Encoding                                                             #
    # ------------------------------------------------------------------ #

    @classmethod
    def from_meeting(cls, source: Meeting) -> MeetingRecord:
        """Convert *source* into its persisted form.

        Raises ``IllegalValueError`` for a meeting without a location or
        one outside the years the stored date form can hold, since such a
        record could not be loaded back unchanged.
        """
        if source.location is None:
            raise _illegal(MISSING_FIELD_MESSAGE_FORMAT % Location.__name__, "location")
        if not source.date_time.is_storable():
            raise _illegal(DateTime.MESSAGE_STORED_RANGE, "dateTime")
        return cls(
            title=source.title.value,
            duration=source.duration.to_stored(),
            date_time=source.date_time.format(),
            location=source.location.value,
            recurrence=str(source.recurrence),
            participants=[str(p) for p in ordered_ids(source.get_participants())],
        )

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> MeetingRecord:
        """Build a record from a decoded JSON object.

        A payload of the wrong shape (e.g. a number where text belongs)
        raises ``IllegalValueError`` naming the first offending field.
        """
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else None
            raise _illegal(
                PARSE_ERROR_MESSAGE_FORMAT % _FIELD_NAMES.get(field, "record"), field
            ) from exc

    def to_dict(self) -> dict[str, Any]:
        """Return the alias-keyed dict written to the data file."""
        return self.model_dump(by_alias=True)

    # ------------------------------------------------------------------ #
    # Decoding                                                             #
    # ------------------------------------------------------------------ #

    def to_meeting(self) -> Meeting:
        """Convert this record back into a :class:`Meeting`.

        Raises ``IllegalValueError`` on the first field that violates a
        data constraint.
        """
        model_title = self._decode_title()
        model_duration = self._decode_duration()
        model_date_time = self._decode_date_time()
        model_location = self._decode_location()
        model_recurrence = self._decode_recurrence()
        model_participants = self._decode_participants()
        return Meeting(
            model_title,
            model_duration,
            model_date_time,
            model_location,
            model_recurrence,
            model_participants,
        )

    def _decode_title(self) -> Title:
        if self.title is None:
            raise _illegal(MISSING_FIELD_MESSAGE_FORMAT % Title.__name__, "title")
        if not Title.is_valid_title(self.title):
            raise _illegal(Title.MESSAGE_CONSTRAINTS, "title")
        return Title(self.title)

    def _decode_duration(self) -> Duration:
        if self.duration is None:
            raise _illegal(MISSING_FIELD_MESSAGE_FORMAT % Duration.__name__, "duration")
        try:
            hours, minutes = Duration.split_stored(self.duration)
        except InvalidArgumentError as exc:
            raise _illegal(
                PARSE_ERROR_MESSAGE_FORMAT % Duration.__name__, "duration"
            ) from exc
        if not Duration.is_valid_duration(hours, minutes):
            raise _illegal(Duration.MESSAGE_CONSTRAINTS, "duration")
        return Duration(hours, minutes)

    def _decode_date_time(self) -> DateTime:
        if self.date_time is None:
            raise _illegal(MISSING_FIELD_MESSAGE_FORMAT % DateTime.__name__, "dateTime")
        try:
            return DateTime.parse(self.date_time)
        except DateTimeParseError as exc:
            raise _illegal(
                PARSE_ERROR_MESSAGE_FORMAT % DateTime.__name__, "dateTime"
            ) from exc

    def _decode_location(self) -> Location:
        if self.location is None:
            raise _illegal(MISSING_FIELD_MESSAGE_FORMAT % Location.__name__, "location")
        if not Location.is_valid_location(self.location):
            raise _illegal(Location.MESSAGE_CONSTRAINTS, "location")
        return Location(self.location)

    def _decode_recurrence(self) -> Recurrence:
        if self.recurrence is None:
            return Recurrence.NONE
        if not Recurrence.is_valid(self.recurrence):
            raise _illegal(Recurrence.MESSAGE_CONSTRAINTS, "recurrence")
        return Recurrence.of_nullable(self.recurrence)

    def _decode_participants(self) -> set[UUID]:
        try:
            return {parse_participant_id(p) for p in self.participants or ()}
        except ValueError as exc:
            raise _illegal(
                PARSE_ERROR_MESSAGE_FORMAT % "Participants", "participants"
            ) from exc


def _illegal(message: str, field: str | None) -> IllegalValueError:
    logger.warning("meeting_record.illegal_value", field=field, reason=message)
    return IllegalValueError(message, field=field)
