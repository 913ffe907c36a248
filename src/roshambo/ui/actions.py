"""UI event dispatch: button presses and menu actions into controller calls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from roshambo.core.modes import GameMode, builtin_mode
from roshambo.game.controller import GameController


class ChatActions:
    """Forwards user actions to the controller it was constructed with."""

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController) -> None:
        self._controller = controller

    def action_reset(self) -> None:
        self._controller.reset()

    def action_change_player_mode(self) -> None:
        self._controller.change_player_mode()

    def action_play(self, move: str) -> None:
        """Register a press on the footer button *move* (a shape id or ``"random"``)."""
        self._controller.play(move)

    def action_change_game_mode(self, mode: str | Mapping[str, Any] | GameMode) -> None:
        """Switch to a built-in mode by name, or to an explicit specification."""
        if isinstance(mode, str):
            mode = builtin_mode(mode)
        self._controller.change_game_mode(mode)
