"""Custom exception hierarchy for the meeting planner."""


class MeetingPlannerError(Exception):
    """Base exception for all meeting planner errors."""


# --- Construction ---
class InvalidArgumentError(MeetingPlannerError, ValueError):
    """A value object or meeting was built from an invalid argument."""


class NullFieldError(InvalidArgumentError):
    """A required meeting field was absent."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Meeting field '{field_name}' must not be None")


class DateTimeParseError(InvalidArgumentError):
    """Text does not match the stored date-time pattern."""

    def __init__(self, text: str, pattern: str):
        self.text = text
        self.pattern = pattern
        super().__init__(f"Cannot parse {text!r} with pattern '{pattern}'")


# --- Storage ---
class IllegalValueError(MeetingPlannerError):
    """A persisted record violates a data constraint.

    Always attributable to exactly one field; the message is meant to be
    shown to the end user (e.g. "corrupt data file").
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


# --- Configuration ---
class ConfigError(MeetingPlannerError):
    """Invalid or unreadable configuration."""
