"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import random
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from roshambo.core.modes import MODES, builtin_mode, load_mode_file
from roshambo.core.rules import RuleEngine
from roshambo.game.controller import GameController
from roshambo.settings import AppSettings
from roshambo.ui.actions import ChatActions
from roshambo.ui.chat_log import ChatEntry, EntryKind
from roshambo.ui.chat_view import ChatView
from roshambo.ui.ticker import SchedulerTicker

_LOGGER = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything one running game is made of, wired together."""

    settings: AppSettings
    engine: RuleEngine
    view: ChatView
    controller: GameController
    actions: ChatActions
    ticker: SchedulerTicker
    rng: random.Random


def resolve_mode(name_or_path: str) -> Mapping[str, Any]:
    """Built-in mode *name_or_path*, or the JSON mode file at that path."""
    if name_or_path in MODES:
        return builtin_mode(name_or_path)
    path = Path(name_or_path)
    if not path.is_file():
        raise KeyError(
            f"Unknown game mode {name_or_path!r} "
            f"(not a built-in mode: {', '.join(MODES)}; not a file)"
        )
    return load_mode_file(path)


def build_session(
    settings: AppSettings,
    *,
    clock: Callable[[], float] | None = None,
) -> Session:
    """Create engine, view, controller and tick driver for *settings*.

    Without an explicit *clock* the view reads a started
    ``QElapsedTimer``.
    """
    if clock is None:
        from PyQt6.QtCore import QElapsedTimer

        elapsed = QElapsedTimer()
        elapsed.start()
        clock = elapsed.elapsed

    rng = random.Random(settings.seed)
    engine = RuleEngine(rng=rng)
    view = ChatView(clock=clock)
    controller = GameController(
        engine,
        view,
        rng=rng,
        mode=resolve_mode(settings.game_mode),
        player_mode=settings.player_mode,
    )
    actions = ChatActions(controller)
    ticker = SchedulerTicker(view.tick, settings.tick_interval_ms)
    return Session(
        settings=settings,
        engine=engine,
        view=view,
        controller=controller,
        actions=actions,
        ticker=ticker,
        rng=rng,
    )


def _log_entry(entry: ChatEntry) -> None:
    if entry.kind == EntryKind.LOADING:
        return
    if entry.kind == EntryKind.DIVIDER:
        _LOGGER.info("---- %s ----", entry.text)
    else:
        _LOGGER.info("%-6s %s", f"{entry.kind}:", entry.text)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the Qt event loop for a self-playing session."""
    from PyQt6.QtCore import QCoreApplication

    from roshambo.ui.autoplay import AutoPlayer

    app = QCoreApplication.instance() or QCoreApplication(
        sys.argv if argv is None else argv
    )
    app.setApplicationName("Roshambo")
    settings = settings or AppSettings()

    session = build_session(settings)
    session.view.log.listeners.on_entry.append(_log_entry)
    AutoPlayer(
        session.controller,
        session.actions,
        session.view.log,
        rounds=settings.rounds,
        delay_ms=settings.autoplay_delay_ms,
        on_finished=app.quit,
        rng=session.rng,
    )

    mode = session.engine.game_mode
    _LOGGER.info(
        "Starting %s (%s, %d round(s))",
        mode.name if mode else settings.game_mode,
        "player vs pc" if session.controller.in_player_mode else "pc vs pc",
        settings.rounds,
    )
    session.ticker.start()
    session.controller.run()
    try:
        return app.exec()
    finally:
        session.ticker.stop()
