"""Tests for participant identifier helpers."""

from uuid import UUID

import pytest

from meeting_planner.core.ids import new_participant_id, ordered_ids, parse_participant_id


def test_new_ids_are_unique_uuid4():
    ids = {new_participant_id() for _ in range(100)}
    assert len(ids) == 100
    assert all(i.version == 4 for i in ids)


def test_parse_string():
    raw = "11111111-1111-4111-8111-111111111111"
    assert parse_participant_id(raw) == UUID(raw)


def test_parse_passes_uuid_through():
    uid = new_participant_id()
    assert parse_participant_id(uid) is uid


@pytest.mark.parametrize("raw", ["", "alice", 42, None])
def test_parse_rejects(raw):
    with pytest.raises(ValueError):
        parse_participant_id(raw)


def test_ordered_ids_sorted_by_text():
    a = UUID("aaaaaaaa-0000-4000-8000-000000000000")
    b = UUID("bbbbbbbb-0000-4000-8000-000000000000")
    assert ordered_ids({b, a}) == [a, b]
