"""GameController — turns plays into engine calls and narration commands.

Coordinates: RuleEngine, an INarrator, the message tables.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from roshambo.core.enums import Outcome
from roshambo.core.modes import GameMode, Shape, builtin_mode
from roshambo.core.rules import RuleEngine
from roshambo.game.interfaces import INarrator
from roshambo.game.messages import result_message

_LOGGER = logging.getLogger(__name__)

RANDOM_SHAPE_ID = "random"
RANDOM_BUTTON = Shape(RANDOM_SHAPE_ID, "Play")

# ── Event definitions ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RoundResult:
    """One resolved round; the computer is the first party."""

    pc_shape: str
    player_shape: str
    outcome: Outcome
    pc_score: int
    player_score: int


RoundCallback = Callable[[RoundResult], None]
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_round: list[RoundCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a match between the player and the computer.

    Each public operation resolves against the engine right away and then
    queues the narration on the narrator with fixed pacing, so the
    transcript plays out one step at a time.
    """

    # Opening sequence pacing (ms, relative to the previous step)
    _HIDE_LOADING_DELAY_MS = 1000
    _GREETING_DELAY_MS = 100
    _PROMPT_DELAY_MS = 1500
    _OPENING_DIVIDER_DELAY_MS = 1000
    _SHOW_FOOTER_DELAY_MS = 1000

    # Round sequence pacing
    _ANSWER_DELAY_MS = 100
    _SCORE_DELAY_MS = 750

    __slots__ = ("_engine", "_narrator", "_rng", "_in_player_mode", "events")

    def __init__(
        self,
        engine: RuleEngine,
        narrator: INarrator,
        *,
        rng: random.Random | None = None,
        mode: Mapping[str, Any] | GameMode | None = None,
        player_mode: bool = True,
    ) -> None:
        self._engine = engine
        self._narrator = narrator
        self._rng = rng or random.Random()
        self._in_player_mode = player_mode
        self.events = GameEvents()

        if mode is None:
            mode = builtin_mode("classical")
        self._engine.set_game_mode(mode)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> RuleEngine:
        return self._engine

    @property
    def in_player_mode(self) -> bool:
        """``True`` for player vs computer, ``False`` for computer vs computer."""
        return self._in_player_mode

    # ── Public API ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Start the narrator clock and play the opening sequence."""
        self._narrator.run()
        self.reset()

    def reset(self) -> None:
        """Zero the score, drop pending narration and greet again."""
        buttons = self.footer_buttons()
        self._engine.reset()

        view = self._narrator
        view.reset()
        view.do_clean_chat()
        view.do_hide_footer()
        view.do_show_loading(0)
        view.do_hide_loading(self._HIDE_LOADING_DELAY_MS)
        view.do_add_pc_message("Let's play!", self._GREETING_DELAY_MS)
        view.do_add_pc_message("Your move...", self._PROMPT_DELAY_MS)
        view.do_add_divider(self._score_line(), self._OPENING_DIVIDER_DELAY_MS)
        view.do_show_footer(buttons, self._SHOW_FOOTER_DELAY_MS)
        view.do_unlock_footer()

        for cb in self.events.on_reset:
            cb()

    def play(self, player_shape: str) -> RoundResult:
        """Register a player move (a shape id of the mode or ``"random"``)."""
        engine = self._engine
        if player_shape == RANDOM_SHAPE_ID:
            player_shape = engine.get_random_shape_id()
        player_label = engine.get_label(player_shape)

        pc_shape = engine.get_random_shape_id()
        pc_label = engine.get_label(pc_shape)

        outcome = engine.play(pc_shape, player_shape)
        message = f"{pc_label}, {result_message(outcome, self._rng)}"
        _LOGGER.debug(
            "Round: pc=%s player=%s -> %s (%s)",
            pc_shape,
            player_shape,
            outcome,
            self._score_line(),
        )

        view = self._narrator
        view.do_lock_footer()
        view.do_add_player_message(player_label)
        view.do_add_pc_message(message, self._ANSWER_DELAY_MS)
        view.do_add_divider(self._score_line(), self._SCORE_DELAY_MS)
        view.do_unlock_footer(0)

        result = RoundResult(
            pc_shape=pc_shape,
            player_shape=player_shape,
            outcome=outcome,
            pc_score=engine.score1,
            player_score=engine.score2,
        )
        for cb in self.events.on_round:
            cb(result)
        return result

    def change_player_mode(self) -> None:
        """Toggle player vs computer / computer vs computer and restart."""
        self._in_player_mode = not self._in_player_mode
        self.reset()

    def change_game_mode(self, mode: Mapping[str, Any] | GameMode) -> None:
        """Install another game mode and restart.

        A rejected *mode* raises before anything changes.
        """
        self._engine.set_game_mode(mode)
        self.reset()

    def footer_buttons(self) -> list[Shape]:
        """Buttons offered to the player for the next move."""
        if self._in_player_mode:
            return self._engine.get_all_shapes()
        return [RANDOM_BUTTON]

    # ── Internal helpers ─────────────────────────────────────────────────

    def _score_line(self) -> str:
        return f"{self._engine.score1} x {self._engine.score2}"
