"""Core domain layer — beats-game rules with zero external dependencies.

Quick start::

    from roshambo.core import RuleEngine, builtin_mode

    engine = RuleEngine()
    engine.set_game_mode(builtin_mode("classical"))
    engine.play("paper", "rock")   # Outcome.FIRST_WINS
"""

from roshambo.core.enums import Outcome
from roshambo.core.errors import (
    DuplicateShapeId,
    DuplicateShapeLabel,
    GameModeError,
    IncompleteCoverage,
    InsufficientShapes,
    InvalidModeId,
    InvalidModeName,
    InvalidModeType,
    InvalidRuleCollection,
    InvalidRuleReference,
    InvalidShapeCollection,
    InvalidShapeElement,
)
from roshambo.core.modes import (
    CLASSICAL,
    LIZARD_SPOCK,
    MODES,
    GameMode,
    Shape,
    builtin_mode,
    load_mode_file,
)
from roshambo.core.rules import RuleEngine

__all__ = [
    # Enums
    "Outcome",
    # Errors
    "DuplicateShapeId",
    "DuplicateShapeLabel",
    "GameModeError",
    "IncompleteCoverage",
    "InsufficientShapes",
    "InvalidModeId",
    "InvalidModeName",
    "InvalidModeType",
    "InvalidRuleCollection",
    "InvalidRuleReference",
    "InvalidShapeCollection",
    "InvalidShapeElement",
    # Domain objects
    "GameMode",
    "RuleEngine",
    "Shape",
    # Built-in modes
    "CLASSICAL",
    "LIZARD_SPOCK",
    "MODES",
    "builtin_mode",
    "load_mode_file",
]
