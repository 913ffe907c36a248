"""Tests for ChatView — scheduled narration into the chat log."""

from __future__ import annotations

import random

from roshambo.core.enums import Outcome
from roshambo.core.modes import Shape
from roshambo.core.rules import RuleEngine
from roshambo.game.controller import GameController
from roshambo.ui.chat_log import ChatEntry, EntryKind
from roshambo.ui.chat_view import ChatView

from conftest import FakeClock


def _drain(view: ChatView, clock: FakeClock, step: float = 50) -> None:
    for _ in range(10_000):
        if not view.pending:
            return
        clock.advance(step)
        view.tick()
    raise AssertionError("scheduler did not drain")


def _game(clock: FakeClock, seed: int = 1) -> tuple[GameController, ChatView]:
    view = ChatView(clock=clock)
    rng = random.Random(seed)
    ctrl = GameController(RuleEngine(rng=rng), view, rng=rng)
    return ctrl, view


class TestCommands:
    def test_commands_wait_for_tick(self, clock: FakeClock) -> None:
        view = ChatView(clock=clock)
        view.run()
        view.do_add_pc_message("hello")
        assert view.pending == 1
        assert view.log.entries == ()

        view.tick()
        assert view.log.entries == (ChatEntry(EntryKind.PC, "hello"),)
        assert view.pending == 0

    def test_delay_is_honoured(self, clock: FakeClock) -> None:
        view = ChatView(clock=clock)
        view.run()
        view.do_add_divider("0 x 0", 300)

        clock.advance(299)
        view.tick()
        assert view.log.entries == ()

        clock.advance(1)
        view.tick()
        assert view.log.texts(EntryKind.DIVIDER) == ["0 x 0"]

    def test_footer_buttons_are_snapshotted(self, clock: FakeClock) -> None:
        view = ChatView(clock=clock)
        view.run()
        buttons = [Shape("rock", "Rock")]
        view.do_show_footer(buttons)
        buttons.append(Shape("paper", "Paper"))
        view.tick()
        assert view.log.buttons == (Shape("rock", "Rock"),)

    def test_reset_drops_pending(self, clock: FakeClock) -> None:
        view = ChatView(clock=clock)
        view.run()
        view.do_add_pc_message("a")
        view.do_add_pc_message("b", 100)
        view.reset()
        assert view.pending == 0
        clock.advance(1000)
        view.tick()
        assert view.log.entries == ()

    def test_one_command_per_tick(self, clock: FakeClock) -> None:
        view = ChatView(clock=clock)
        view.run()
        view.do_add_pc_message("a")
        view.do_add_pc_message("b")
        view.tick()
        assert view.log.texts() == ["a"]
        view.tick()
        assert view.log.texts() == ["a", "b"]


class TestNarratedGame:
    def test_opening_transcript(self, clock: FakeClock) -> None:
        ctrl, view = _game(clock)
        ctrl.run()
        _drain(view, clock)

        log = view.log
        assert log.entries == (
            ChatEntry(EntryKind.PC, "Let's play!"),
            ChatEntry(EntryKind.PC, "Your move..."),
            ChatEntry(EntryKind.DIVIDER, "0 x 0"),
        )
        assert [b.id for b in log.buttons] == ["paper", "rock", "scissor"]
        assert log.accepts_play

    def test_opening_pacing(self, clock: FakeClock) -> None:
        ctrl, view = _game(clock)
        ctrl.run()

        for _ in range(3):
            view.tick()
        assert view.log.has_loading
        assert view.log.footer_hidden

        clock.advance(999)
        view.tick()
        assert view.log.has_loading

        clock.advance(1)
        view.tick()
        assert not view.log.has_loading

        view.tick()
        clock.advance(99)
        view.tick()
        assert view.log.texts() == []
        clock.advance(1)
        view.tick()
        assert view.log.texts() == ["Let's play!"]

    def test_round_transcript(self, clock: FakeClock) -> None:
        ctrl, view = _game(clock)
        ctrl.run()
        _drain(view, clock)

        locks: list[bool] = []
        view.log.listeners.on_footer_changed.append(
            lambda lg: locks.append(lg.footer_locked)
        )
        result = ctrl.play("rock")
        assert view.log.texts(EntryKind.PLAYER) == []
        _drain(view, clock)

        entries = view.log.entries[3:]
        assert [e.kind for e in entries] == [
            EntryKind.PLAYER,
            EntryKind.PC,
            EntryKind.DIVIDER,
        ]
        assert entries[0].text == "Rock"
        assert entries[1].text.startswith(ctrl.engine.get_label(result.pc_shape) + ", ")
        expected = {
            Outcome.FIRST_WINS: "1 x 0",
            Outcome.SECOND_WINS: "0 x 1",
            Outcome.TIE: "0 x 0",
        }[result.outcome]
        assert entries[2].text == expected
        assert locks == [True, False]

    def test_reset_mid_round_restarts_cleanly(self, clock: FakeClock) -> None:
        ctrl, view = _game(clock)
        ctrl.run()
        _drain(view, clock)
        ctrl.play("paper")
        view.tick()

        ctrl.reset()
        assert view.pending == 9
        _drain(view, clock)
        assert view.log.texts() == ["Let's play!", "Your move...", "0 x 0"]
        assert not view.log.footer_locked

    def test_player_mode_toggle_swaps_buttons(self, clock: FakeClock) -> None:
        ctrl, view = _game(clock)
        ctrl.run()
        _drain(view, clock)

        ctrl.change_player_mode()
        _drain(view, clock)
        assert [b.id for b in view.log.buttons] == ["random"]

        ctrl.play("random")
        _drain(view, clock)
        assert len(view.log.texts(EntryKind.PLAYER)) == 1
