"""Meeting domain model: scheduled meetings, recurrence and storage records."""

from meeting_planner.core.enums import Recurrence
from meeting_planner.domain.meeting import Meeting
from meeting_planner.domain.values import DateTime, Duration, Location, Title
from meeting_planner.storage.meeting_record import MeetingRecord

__version__ = "0.1.0"

__all__ = [
    "DateTime",
    "Duration",
    "Location",
    "Meeting",
    "MeetingRecord",
    "Recurrence",
    "Title",
]
