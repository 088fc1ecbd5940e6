"""Canonical participant identifier helpers.

Participants are referenced by UUID only; the person records they point at
are owned by the contact book and looked up there.

Stored form
-----------
Identifiers are persisted as canonical lowercase hyphenated UUID strings
(``str(uuid.UUID)``).
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable
from uuid import UUID


def new_participant_id() -> UUID:
    """Generate a new random participant identifier (UUID v4)."""
    return uuid.uuid4()


def parse_participant_id(raw: str | UUID) -> UUID:
    """Return *raw* as a ``UUID``.

    Raises ``ValueError`` when *raw* is not a UUID string.
    """
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"Participant id must be a string, got {type(raw).__name__}")
    return UUID(raw)


def ordered_ids(ids: Iterable[UUID]) -> list[UUID]:
    """Return *ids* in a stable order (by canonical string form)."""
    return sorted(ids, key=str)
