"""Tests for UI action dispatch."""

from __future__ import annotations

import pytest

from roshambo.core.errors import GameModeError
from roshambo.core.rules import RuleEngine
from roshambo.game.controller import GameController
from roshambo.ui.actions import ChatActions
from roshambo.ui.chat_view import ChatView

from conftest import FakeClock


def _actions(clock: FakeClock) -> tuple[ChatActions, GameController]:
    ctrl = GameController(RuleEngine(), ChatView(clock=clock))
    return ChatActions(ctrl), ctrl


class TestChatActions:
    def test_play_reaches_controller(self, clock: FakeClock) -> None:
        actions, ctrl = _actions(clock)
        rounds: list[object] = []
        ctrl.events.on_round.append(rounds.append)
        actions.action_play("rock")
        assert len(rounds) == 1
        assert ctrl.engine.score1 + ctrl.engine.score2 <= 1

    def test_reset(self, clock: FakeClock) -> None:
        actions, ctrl = _actions(clock)
        resets: list[bool] = []
        ctrl.events.on_reset.append(lambda: resets.append(True))
        actions.action_reset()
        assert resets == [True]

    def test_change_player_mode(self, clock: FakeClock) -> None:
        actions, ctrl = _actions(clock)
        actions.action_change_player_mode()
        assert not ctrl.in_player_mode

    def test_change_game_mode_by_name(self, clock: FakeClock) -> None:
        actions, ctrl = _actions(clock)
        actions.action_change_game_mode("lizard_spock")
        mode = ctrl.engine.game_mode
        assert mode is not None and mode.id == "lizard_spock"

    def test_unknown_mode_name(self, clock: FakeClock) -> None:
        actions, ctrl = _actions(clock)
        with pytest.raises(KeyError):
            actions.action_change_game_mode("chess")
        mode = ctrl.engine.game_mode
        assert mode is not None and mode.id == "classical"

    def test_invalid_mode_spec(self, clock: FakeClock) -> None:
        actions, _ = _actions(clock)
        with pytest.raises(GameModeError):
            actions.action_change_game_mode({"id": "x", "name": "x", "shapes": []})
