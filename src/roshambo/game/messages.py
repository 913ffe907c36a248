"""Computer chat lines for each round outcome.

The computer is always the first party, so ``FIRST_WINS`` means it won.
"""

from __future__ import annotations

import random
from typing import Final

from roshambo.core.enums import Outcome

WIN_MESSAGES: Final = (
    "I won!",
    "that goes to me!",
    "my point!",
    "one more to me.",
    "I won =)",
)

LOSE_MESSAGES: Final = (
    "you won!",
    "you won :C",
    "your point",
    "I lost!",
    "I lost :'(",
)

TIE_MESSAGES: Final = (
    "tied!",
    "that's a tie!",
    "tie!",
)

_BY_OUTCOME: Final = {
    Outcome.FIRST_WINS: WIN_MESSAGES,
    Outcome.SECOND_WINS: LOSE_MESSAGES,
    Outcome.TIE: TIE_MESSAGES,
}


def result_message(outcome: Outcome, rng: random.Random | None = None) -> str:
    """Pick a random chat line for *outcome*."""
    return (rng or random).choice(_BY_OUTCOME[outcome])
