"""ChatView — narrates rounds into a :class:`ChatLog` through the scheduler.

Every ``do_*`` command becomes a closure queued on a
:class:`CommandScheduler`; nothing touches the transcript until a tick
reaches it, so a burst of commands plays out with its declared pacing.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from roshambo.core.modes import Shape
from roshambo.game.interfaces import INarrator
from roshambo.game.scheduler import CommandScheduler
from roshambo.ui.chat_log import ChatLog, EntryKind

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class ChatView(INarrator):
    """Headless view: scheduler-backed commands acting on a chat log.

    Args:
        log: Transcript to narrate into (a fresh one by default).
        scheduler: Queue the commands go through.
        clock: Millisecond clock read by :meth:`run` and :meth:`tick`.
    """

    __slots__ = ("_log", "_scheduler", "_clock")

    def __init__(
        self,
        log: ChatLog | None = None,
        scheduler: CommandScheduler | None = None,
        clock: Clock = monotonic_ms,
    ) -> None:
        self._log = log or ChatLog()
        self._scheduler = scheduler or CommandScheduler()
        self._clock = clock

    @property
    def log(self) -> ChatLog:
        return self._log

    @property
    def scheduler(self) -> CommandScheduler:
        return self._scheduler

    @property
    def pending(self) -> int:
        """Number of commands not played yet."""
        return len(self._scheduler)

    # ── Clock ────────────────────────────────────────────────────────────

    def run(self) -> None:
        self._scheduler.start(self._clock())

    def tick(self) -> None:
        """Advance the scheduler to the current clock reading."""
        self._scheduler.tick(self._clock())

    def reset(self) -> None:
        self._scheduler.reset()

    # ── INarrator commands ───────────────────────────────────────────────

    def do_clean_chat(self, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(self._log.clear, delay_ms)

    def do_add_player_message(self, message: str, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(
            lambda: self._log.append(EntryKind.PLAYER, message), delay_ms
        )

    def do_add_pc_message(self, message: str, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(
            lambda: self._log.append(EntryKind.PC, message), delay_ms
        )

    def do_add_divider(self, message: str, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(
            lambda: self._log.append(EntryKind.DIVIDER, message), delay_ms
        )

    def do_lock_footer(self, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(self._log.lock_footer, delay_ms)

    def do_unlock_footer(self, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(self._log.unlock_footer, delay_ms)

    def do_show_footer(self, buttons: Sequence[Shape], delay_ms: float = 0) -> None:
        snapshot = tuple(buttons)
        self._scheduler.enqueue(lambda: self._log.show_footer(snapshot), delay_ms)

    def do_hide_footer(self, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(self._log.hide_footer, delay_ms)

    def do_show_loading(self, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(self._log.add_loading, delay_ms)

    def do_hide_loading(self, delay_ms: float = 0) -> None:
        self._scheduler.enqueue(self._log.remove_loading, delay_ms)
