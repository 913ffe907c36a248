"""Tests for CommandScheduler."""

from __future__ import annotations

import pytest

from roshambo.game.scheduler import CommandScheduler, SchedulerState


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[str] = []

    def action(self, name: str):
        return lambda: self.calls.append(name)


class TestEnqueue:
    def test_initially_idle(self) -> None:
        scheduler = CommandScheduler()
        assert len(scheduler) == 0
        assert scheduler.state == SchedulerState.IDLE
        assert scheduler.head_remaining is None

    def test_enqueue_appends(self) -> None:
        scheduler = CommandScheduler()
        scheduler.enqueue(lambda: None, 1000)
        scheduler.enqueue(lambda: None, 5)
        assert len(scheduler) == 2
        assert scheduler.head_remaining == 1000
        assert scheduler.state == SchedulerState.WAITING

    def test_zero_delay_is_ready(self) -> None:
        scheduler = CommandScheduler()
        scheduler.enqueue(lambda: None)
        assert scheduler.state == SchedulerState.READY

    def test_negative_delay_rejected(self) -> None:
        scheduler = CommandScheduler()
        with pytest.raises(ValueError):
            scheduler.enqueue(lambda: None, -1)
        assert len(scheduler) == 0

    def test_enqueue_does_not_run(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.enqueue(rec.action("a"))
        assert rec.calls == []


class TestTick:
    def test_runs_after_full_delay(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(rec.action("a"), 1000)

        scheduler.tick(500)
        assert rec.calls == []
        assert scheduler.head_remaining == 500

        scheduler.tick(1000)
        assert rec.calls == ["a"]
        assert len(scheduler) == 0
        assert scheduler.state == SchedulerState.IDLE

    def test_overdue_head_runs_once(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(rec.action("a"), 10)
        scheduler.tick(5000)
        scheduler.tick(5000)
        assert rec.calls == ["a"]

    def test_one_command_per_tick(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(rec.action("a"), 0)
        scheduler.enqueue(rec.action("b"), 0)

        scheduler.tick(16)
        assert rec.calls == ["a"]
        assert len(scheduler) == 1

        scheduler.tick(32)
        assert rec.calls == ["a", "b"]

    def test_large_elapsed_still_one_per_tick(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        for name, delay in (("a", 10), ("b", 10), ("c", 10)):
            scheduler.enqueue(rec.action(name), delay)

        scheduler.tick(10_000)
        assert rec.calls == ["a"]
        scheduler.tick(10_000)
        assert rec.calls == ["a"]  # zero elapsed, "b" still has 10ms
        scheduler.tick(10_010)
        assert rec.calls == ["a", "b"]

    def test_later_entries_untouched_until_head(self) -> None:
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(lambda: None, 100)
        scheduler.enqueue(lambda: None, 300)
        scheduler.tick(100)
        assert scheduler.head_remaining == 300
        scheduler.tick(250)
        assert scheduler.head_remaining == 150

    def test_delay_accumulates_across_irregular_ticks(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(rec.action("a"), 100)
        for now in (7, 40, 41, 99):
            scheduler.tick(now)
        assert rec.calls == []
        scheduler.tick(100)
        assert rec.calls == ["a"]

    def test_first_tick_without_start_only_records_time(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.enqueue(rec.action("a"), 50)
        scheduler.tick(1_000_000)
        assert rec.calls == []
        assert scheduler.head_remaining == 50
        scheduler.tick(1_000_050)
        assert rec.calls == ["a"]

    def test_idle_ticks_advance_reference_time(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.tick(5000)
        scheduler.enqueue(rec.action("a"), 100)
        scheduler.tick(5050)
        assert rec.calls == []
        assert scheduler.head_remaining == 50

    def test_action_may_enqueue(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)

        def chain() -> None:
            rec.calls.append("first")
            scheduler.enqueue(rec.action("second"), 0)

        scheduler.enqueue(chain, 0)
        scheduler.tick(1)
        assert rec.calls == ["first"]
        scheduler.tick(2)
        assert rec.calls == ["first", "second"]

    def test_action_may_reset(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)

        def restart() -> None:
            scheduler.reset()
            scheduler.enqueue(rec.action("fresh"), 0)

        scheduler.enqueue(restart, 0)
        scheduler.enqueue(rec.action("stale"), 0)
        scheduler.tick(1)
        scheduler.tick(2)
        scheduler.tick(3)
        assert rec.calls == ["fresh"]


class TestReset:
    def test_reset_drops_pending(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(rec.action("a"), 100)
        scheduler.enqueue(rec.action("b"), 100)
        scheduler.tick(50)

        scheduler.reset()
        for now in range(100, 1000, 100):
            scheduler.tick(now)
        assert rec.calls == []
        assert scheduler.state == SchedulerState.IDLE

    def test_enqueue_after_reset(self) -> None:
        rec = _Recorder()
        scheduler = CommandScheduler()
        scheduler.start(0)
        scheduler.enqueue(rec.action("old"), 10)
        scheduler.reset()
        scheduler.enqueue(rec.action("new"), 10)
        scheduler.tick(10)
        assert rec.calls == ["new"]
