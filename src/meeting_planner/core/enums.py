"""Enumerations used across the meeting planner."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import ClassVar

from dateutil.relativedelta import relativedelta


class Recurrence(str, Enum):
    """How often a meeting repeats.

    Each variant knows how to step a moment forward by a number of its
    periods (``advance``).  Month and year steps clamp to the last valid
    day of the target month, so a meeting on Jan 31 recurs on Feb 28/29.
    """

    NONE = "NONE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    MESSAGE_CONSTRAINTS: ClassVar[str]

    @classmethod
    def _missing_(cls, value: object) -> Recurrence | None:
        # Stored names are matched case-insensitively ("weekly" -> WEEKLY).
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        """Return True if *raw* names a variant (case-insensitive)."""
        if not isinstance(raw, str):
            return False
        return raw.strip().upper() in cls._value2member_map_

    @classmethod
    def of_nullable(cls, raw: str | None) -> Recurrence:
        """Parse *raw*, treating ``None`` as ``NONE``."""
        if raw is None:
            return cls.NONE
        return cls(raw)

    def advance(self, moment: datetime, steps: int) -> datetime:
        """Return *moment* moved forward by *steps* periods of this variant."""
        if self is Recurrence.DAILY:
            return moment + timedelta(days=steps)
        if self is Recurrence.WEEKLY:
            return moment + timedelta(weeks=steps)
        if self is Recurrence.MONTHLY:
            return moment + relativedelta(months=steps)
        if self is Recurrence.YEARLY:
            return moment + relativedelta(years=steps)
        return moment

    def copy(self) -> Recurrence:
        return self

    def __str__(self) -> str:
        return self.value


Recurrence.MESSAGE_CONSTRAINTS = (
    "Recurrence should be one of: "
    + ", ".join(member.value for member in Recurrence)
)
