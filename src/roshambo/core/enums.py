"""Core enumerations for the beats-game domain."""

from __future__ import annotations

from enum import IntEnum


class Outcome(IntEnum):
    """Resolved result of one round between two parties."""

    FIRST_WINS = 0
    SECOND_WINS = 1
    TIE = -1

    @property
    def is_decisive(self) -> bool:
        return self is not Outcome.TIE

    def __str__(self) -> str:
        return self.name.lower()
