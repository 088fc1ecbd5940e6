"""Protocol interfaces for the collaborators a meeting talks to.

The contact book and the command layer live outside this package; these
protocols describe the only parts of them the meeting model relies on.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class IParticipant(Protocol):
    """Anything with a stable unique identifier (e.g. a contact record)."""

    @property
    def uuid(self) -> UUID: ...


@runtime_checkable
class IPositionalIndex(Protocol):
    """A position in a listing, counted from zero."""

    @property
    def zero_based(self) -> int: ...
