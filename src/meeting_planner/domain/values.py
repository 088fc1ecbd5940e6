"""Validated value objects that make up a meeting.

Each value object:
- Is immutable (frozen dataclass) and compared by value
- Validates itself on creation and raises ``InvalidArgumentError``
- Exposes ``MESSAGE_CONSTRAINTS`` and an ``is_valid_*`` predicate so the
  storage layer can check raw input with the same rule before building it
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from meeting_planner.core.enums import Recurrence
from meeting_planner.core.errors import DateTimeParseError, InvalidArgumentError

# First character must not be whitespace; the rest is free text on one line.
_NON_BLANK = re.compile(r"[^\s].*")

# Plain ASCII integers only: no "+", "_" separators or non-Latin digits.
_STORED_DURATION = re.compile(r"(-?\d+) (-?\d+)", re.ASCII)


@dataclass(frozen=True)
class Title:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Titles should not be blank and should not start with whitespace"
    )

    def __post_init__(self) -> None:
        if not self.is_valid_title(self.value):
            raise InvalidArgumentError(self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid_title(raw: object) -> bool:
        return isinstance(raw, str) and _NON_BLANK.fullmatch(raw) is not None

    def copy(self) -> Title:
        return Title(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Locations should not be blank and should not start with whitespace"
    )

    def __post_init__(self) -> None:
        if not self.is_valid_location(self.value):
            raise InvalidArgumentError(self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid_location(raw: object) -> bool:
        return isinstance(raw, str) and _NON_BLANK.fullmatch(raw) is not None

    def copy(self) -> Location:
        return Location(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Duration:
    """Length of a meeting in whole hours and minutes.

    Hours have no upper bound; minutes must stay within a single hour.
    """

    hours: int
    minutes: int

    MAX_MINUTES: ClassVar[int] = 59
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Hours should not be negative and the number of minutes "
        "should be between 0 and 59"
    )
    MESSAGE_FORMAT: ClassVar[str] = (
        "Duration should be given as '<hours> <minutes>', e.g. '1 30'"
    )

    def __post_init__(self) -> None:
        if not self.is_valid_duration(self.hours, self.minutes):
            raise InvalidArgumentError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def parse(cls, text: str) -> Duration:
        """Build a duration from its stored ``"<hours> <minutes>"`` form."""
        hours, minutes = cls.split_stored(text)
        return cls(hours, minutes)

    @classmethod
    def split_stored(cls, text: str) -> tuple[int, int]:
        """Split ``"<hours> <minutes>"`` into integers without validating range."""
        match = _STORED_DURATION.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidArgumentError(cls.MESSAGE_FORMAT)
        return int(match.group(1)), int(match.group(2))

    @classmethod
    def is_valid_duration(cls, hours: int, minutes: int) -> bool:
        return (
            _is_plain_int(hours)
            and _is_plain_int(minutes)
            and hours >= 0
            and 0 <= minutes <= cls.MAX_MINUTES
        )

    def get_hours(self) -> int:
        return self.hours

    def get_minutes(self) -> int:
        return self.minutes

    def to_stored(self) -> str:
        return f"{self.hours} {self.minutes}"

    def to_display_string(self) -> str:
        # "2hrs 30mins", "2hrs", " 5mins" (leading space kept), "" for zero.
        text = ""
        if self.hours != 0:
            text = f"{self.hours}hrs"
        if self.minutes == 0:
            return text
        return f"{text} {self.minutes}mins"

    def copy(self) -> Duration:
        return Duration(self.hours, self.minutes)

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass(frozen=True, order=True)
class DateTime:
    """A local calendar date and time with minute precision."""

    value: datetime

    STORAGE_PATTERN: ClassVar[str] = "d/M/yy HHmm"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Date and time should be given as d/M/yy HHmm, e.g. 15/3/24 1430"
    )
    MIN_STORED_YEAR: ClassVar[int] = 2000
    MAX_STORED_YEAR: ClassVar[int] = 2099
    MESSAGE_STORED_RANGE: ClassVar[str] = (
        "Only meetings between the years 2000 and 2099 can be saved"
    )
    _STORED = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2}) (\d{2})(\d{2})", re.ASCII)

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise InvalidArgumentError(self.MESSAGE_CONSTRAINTS)
        if self.value.tzinfo is not None:
            raise InvalidArgumentError("Meeting times are local; tzinfo must be None")
        object.__setattr__(
            self, "value", self.value.replace(second=0, microsecond=0)
        )

    @classmethod
    def parse(cls, text: str) -> DateTime:
        """Parse the stored ``d/M/yy HHmm`` form; two-digit years are 20yy."""
        match = cls._STORED.fullmatch(text) if isinstance(text, str) else None
        if match is None:
            raise DateTimeParseError(str(text), cls.STORAGE_PATTERN)
        day, month, year, hour, minute = (int(g) for g in match.groups())
        try:
            return cls(datetime(2000 + year, month, day, hour, minute))
        except ValueError as exc:
            raise DateTimeParseError(text, cls.STORAGE_PATTERN) from exc

    @classmethod
    def is_valid_date_time(cls, text: str) -> bool:
        try:
            cls.parse(text)
        except DateTimeParseError:
            return False
        return True

    def is_storable(self) -> bool:
        """Whether the two-digit stored year can represent this moment."""
        return self.MIN_STORED_YEAR <= self.value.year <= self.MAX_STORED_YEAR

    def format(self) -> str:
        """Render in the stored ``d/M/yy HHmm`` form.

        Raises ``InvalidArgumentError`` outside 2000-2099, where the
        two-digit year would read back as a different century.
        """
        if not self.is_storable():
            raise InvalidArgumentError(self.MESSAGE_STORED_RANGE)
        v = self.value
        return f"{v.day}/{v.month}/{v.year % 100:02d} {v.hour:02d}{v.minute:02d}"

    def get_value(self) -> datetime:
        return self.value

    def next_occurrence(self, recurrence: Recurrence, index: int) -> DateTime:
        """Return this moment shifted by *index* periods of *recurrence*."""
        return DateTime(recurrence.advance(self.value, index))

    def is_after(self, moment: datetime) -> bool:
        return self.value > moment

    def copy(self) -> DateTime:
        return DateTime(self.value)

    def __str__(self) -> str:
        return self.value.strftime("%d %b %Y %H:%M")


def _is_plain_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
