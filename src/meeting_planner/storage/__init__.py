"""Persisted record formats."""

from meeting_planner.storage.meeting_record import MeetingRecord

__all__ = ["MeetingRecord"]
