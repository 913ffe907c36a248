"""Qt tick driver: the periodic clock that advances the command scheduler."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


class SchedulerTicker(QObject):
    """Calls *tick* every *interval_ms* on the owning thread's event loop.

    Intervals are not guaranteed; the scheduler measures real elapsed time
    on every call, so an irregular cadence only affects pacing, not order.
    """

    ticked = pyqtSignal()

    def __init__(
        self,
        tick: Callable[[], None],
        interval_ms: int = 16,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._tick = tick
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    def _on_timeout(self) -> None:
        self._tick()
        self.ticked.emit()
