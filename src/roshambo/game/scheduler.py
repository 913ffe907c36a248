"""Time-driven FIFO queue of delayed presentation commands."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto

_LOGGER = logging.getLogger(__name__)

Action = Callable[[], None]


class SchedulerState(IntEnum):
    """Queue state as seen from its head entry."""

    IDLE = auto()  # empty queue
    WAITING = auto()  # head still has time to wait
    READY = auto()  # head will run on the next tick


@dataclass(slots=True)
class ScheduledCommand:
    """An action and the time it still has to wait once it is head."""

    action: Action
    remaining_delay: float


class CommandScheduler:
    """Serialises delayed actions so narration steps play out in order.

    An external periodic clock calls :meth:`tick` with non-decreasing
    millisecond timestamps.  Only the head of the queue is advanced: its
    delay starts counting down once every command before it has run, and
    each tick runs at most one command.  With a coarse tick cadence this
    retires one command per tick, even when several are overdue.

    Actions run synchronously inside :meth:`tick` and must not raise.
    """

    __slots__ = ("_queue", "_last_tick")

    def __init__(self) -> None:
        self._queue: deque[ScheduledCommand] = deque()
        self._last_tick: float | None = None

    # ── Properties ───────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def state(self) -> SchedulerState:
        if not self._queue:
            return SchedulerState.IDLE
        if self._queue[0].remaining_delay <= 0:
            return SchedulerState.READY
        return SchedulerState.WAITING

    @property
    def head_remaining(self) -> float | None:
        """Remaining delay of the head command (``None`` when idle)."""
        if not self._queue:
            return None
        return self._queue[0].remaining_delay

    # ── Public API ───────────────────────────────────────────────────────

    def start(self, now: float) -> None:
        """Record *now* as the reference time for the next tick."""
        self._last_tick = now

    def enqueue(self, action: Action, delay: float = 0) -> None:
        """Append *action* to run *delay* ms after it becomes head."""
        if delay < 0:
            raise ValueError(f"Command delay must be >= 0, got {delay}")
        self._queue.append(ScheduledCommand(action, delay))

    def tick(self, now: float) -> None:
        """Advance the head command by the time elapsed since the last tick.

        A first tick without a prior :meth:`start` only records *now*.
        """
        elapsed = 0.0 if self._last_tick is None else now - self._last_tick
        self._last_tick = now
        if not self._queue:
            return

        head = self._queue[0]
        head.remaining_delay -= elapsed
        if head.remaining_delay <= 0:
            self._queue.popleft()
            head.action()

    def reset(self) -> None:
        """Drop every pending command without running it."""
        if self._queue:
            _LOGGER.debug("Dropping %d pending command(s)", len(self._queue))
        self._queue.clear()


__all__ = ["Action", "CommandScheduler", "ScheduledCommand", "SchedulerState"]
