"""AutoPlayer — presses footer buttons so a session plays by itself."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from roshambo.game.controller import GameController, RoundResult
from roshambo.ui.actions import ChatActions
from roshambo.ui.chat_log import ChatLog

_LOGGER = logging.getLogger(__name__)

Schedule = Callable[[int, Callable[[], None]], None]


def _qt_single_shot(delay_ms: int, callback: Callable[[], None]) -> None:
    from PyQt6.QtCore import QTimer

    QTimer.singleShot(delay_ms, callback)


class AutoPlayer:
    """Plays *rounds* rounds, one each time the footer becomes usable.

    Once the last round's narration has unlocked the footer again,
    *on_finished* is called.

    Args:
        controller: Receives round events.
        actions: Where button presses are dispatched.
        log: Transcript whose footer state is watched.
        rounds: Number of presses before finishing.
        delay_ms: Pause between the footer unlocking and the press.
        on_finished: Called once after the final round.
        rng: Picks the button to press.
        schedule: ``(delay_ms, callback) -> None``; a Qt single-shot
            timer by default.
    """

    __slots__ = (
        "_actions",
        "_log",
        "_rounds",
        "_delay_ms",
        "_on_finished",
        "_rng",
        "_schedule",
        "_played",
        "_press_pending",
        "_finished",
    )

    def __init__(
        self,
        controller: GameController,
        actions: ChatActions,
        log: ChatLog,
        *,
        rounds: int,
        delay_ms: int,
        on_finished: Callable[[], None],
        rng: random.Random | None = None,
        schedule: Schedule = _qt_single_shot,
    ) -> None:
        self._actions = actions
        self._log = log
        self._rounds = rounds
        self._delay_ms = delay_ms
        self._on_finished = on_finished
        self._rng = rng or random.Random()
        self._schedule = schedule
        self._played = 0
        self._press_pending = False
        self._finished = False

        controller.events.on_round.append(self._on_round)
        controller.events.on_reset.append(self._on_reset)
        log.listeners.on_footer_changed.append(self._on_footer_changed)

    @property
    def played(self) -> int:
        return self._played

    @property
    def finished(self) -> bool:
        return self._finished

    def _on_round(self, result: RoundResult) -> None:
        self._played += 1

    def _on_reset(self) -> None:
        self._played = 0
        self._finished = False

    def _on_footer_changed(self, log: ChatLog) -> None:
        if self._finished or self._press_pending or not log.accepts_play:
            return
        if self._played >= self._rounds:
            self._finished = True
            _LOGGER.info("Played %d round(s)", self._played)
            self._on_finished()
            return
        self._press_pending = True
        self._schedule(self._delay_ms, self._press)

    def _press(self) -> None:
        self._press_pending = False
        if self._finished or not self._log.accepts_play:
            return
        button = self._rng.choice(self._log.buttons)
        self._actions.action_play(button.id)
