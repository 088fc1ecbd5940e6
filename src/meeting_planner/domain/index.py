"""Positional index into a listing shown to the user.

Users count from one, code counts from zero; ``Index`` holds the zero-based
form and converts at the edges.
"""

from __future__ import annotations

from dataclasses import dataclass

from meeting_planner.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class Index:
    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise InvalidArgumentError(f"Index must not be negative: {self.zero_based}")

    @classmethod
    def from_zero_based(cls, value: int) -> Index:
        return cls(value)

    @classmethod
    def from_one_based(cls, value: int) -> Index:
        return cls(value - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1
