"""Game-mode validation errors.

Every error is raised synchronously from :meth:`RuleEngine.set_game_mode`
and leaves the previously installed mode active.
"""

from __future__ import annotations


class GameModeError(ValueError):
    """Base class for a rejected game-mode specification."""


class InvalidModeType(GameModeError):
    """The specification is missing or is not a mapping."""


class InvalidModeId(GameModeError):
    """The mode ``id`` is not a string."""


class InvalidModeName(GameModeError):
    """The mode ``name`` is not a string."""


class InvalidShapeCollection(GameModeError):
    """``shapes`` is not a sequence."""


class InsufficientShapes(GameModeError):
    """Fewer than three shapes were declared."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Mode must have at least 3 shapes, got {count}.")
        self.count = count


class InvalidShapeElement(GameModeError):
    """A shape is missing a non-empty ``id`` or ``label``."""


class DuplicateShapeId(GameModeError):
    def __init__(self, shape_id: str) -> None:
        super().__init__(f"Duplicated shape id {shape_id!r}.")
        self.shape_id = shape_id


class DuplicateShapeLabel(GameModeError):
    def __init__(self, label: str) -> None:
        super().__init__(f"Duplicated shape label {label!r}.")
        self.label = label


class InvalidRuleCollection(GameModeError):
    """``rules`` is not a non-empty mapping of id collections."""


class InvalidRuleReference(GameModeError):
    """A rule key or value names a shape that was never declared."""

    def __init__(self, shape_id: object) -> None:
        super().__init__(f"Rule references undeclared shape {shape_id!r}.")
        self.shape_id = shape_id


class IncompleteCoverage(GameModeError):
    """Some shape never beats anything, or is never beaten."""

    def __init__(
        self, never_winning: frozenset[str], never_losing: frozenset[str]
    ) -> None:
        parts = []
        if never_winning:
            parts.append(f"never beats another shape: {sorted(never_winning)}")
        if never_losing:
            parts.append(f"never beaten by another shape: {sorted(never_losing)}")
        super().__init__("Missing shape (" + "; ".join(parts) + ").")
        self.never_winning = never_winning
        self.never_losing = never_losing


__all__ = [
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
]
