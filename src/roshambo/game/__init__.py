"""Game management layer — command scheduler, controller, narration.

Quick start::

    from roshambo.core import RuleEngine
    from roshambo.game import GameController
    from roshambo.ui import ChatView

    ctrl = GameController(RuleEngine(), ChatView())
    ctrl.run()
    ctrl.play("rock")
"""

from roshambo.game.controller import (
    RANDOM_BUTTON,
    RANDOM_SHAPE_ID,
    GameController,
    GameEvents,
    RoundResult,
)
from roshambo.game.interfaces import INarrator
from roshambo.game.messages import (
    LOSE_MESSAGES,
    TIE_MESSAGES,
    WIN_MESSAGES,
    result_message,
)
from roshambo.game.scheduler import CommandScheduler, ScheduledCommand, SchedulerState

__all__ = [
    # Interfaces
    "INarrator",
    # Concrete
    "CommandScheduler",
    "GameController",
    "GameEvents",
    "RoundResult",
    "ScheduledCommand",
    "SchedulerState",
    # Messages
    "LOSE_MESSAGES",
    "RANDOM_BUTTON",
    "RANDOM_SHAPE_ID",
    "TIE_MESSAGES",
    "WIN_MESSAGES",
    "result_message",
]
