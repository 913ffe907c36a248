"""Rule engine: game-mode validation, round resolution and score keeping."""

from __future__ import annotations

import logging
import random
from collections.abc import Collection, Mapping, Sequence
from typing import Any

from roshambo.core.enums import Outcome
from roshambo.core.errors import (
    DuplicateShapeId,
    DuplicateShapeLabel,
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
from roshambo.core.modes import GameMode, Shape

_LOGGER = logging.getLogger(__name__)

MIN_SHAPES = 3


class RuleEngine:
    """Owns the active :class:`GameMode` and the score of both parties.

    The first party is the one passed first to :meth:`check` / :meth:`play`.
    Scores are read-only from the outside; only :meth:`play` and
    :meth:`reset` change them.
    """

    __slots__ = ("_mode", "_labels", "_score1", "_score2", "_rng")

    def __init__(self, rng: random.Random | None = None) -> None:
        self._mode: GameMode | None = None
        self._labels: dict[str, str] = {}
        self._score1 = 0
        self._score2 = 0
        self._rng = rng or random.Random()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def score1(self) -> int:
        return self._score1

    @property
    def score2(self) -> int:
        return self._score2

    @property
    def game_mode(self) -> GameMode | None:
        return self._mode

    # ── Mode management ──────────────────────────────────────────────────

    def set_game_mode(self, mode: Mapping[str, Any] | GameMode) -> None:
        """Validate *mode* and install it as the active game mode.

        *mode* is either a :class:`GameMode` or a mapping with ``id``,
        ``name``, ``shapes`` (at least three unique ``{id, label}``
        entries) and ``rules`` (shape id → ids it beats, where every shape
        beats something and is beaten by something).

        Raises a :class:`~roshambo.core.errors.GameModeError` subclass on
        the first violation; the previously installed mode is kept in that
        case.  Scores are not touched.
        """
        if isinstance(mode, GameMode):
            mode = mode.to_dict()
        if mode is None or not isinstance(mode, Mapping):
            raise InvalidModeType(f"Invalid mode type: {type(mode).__name__}.")

        mode_id = mode.get("id")
        if not isinstance(mode_id, str):
            raise InvalidModeId(f"Mode id must be a string, got {mode_id!r}.")

        name = mode.get("name")
        if not isinstance(name, str):
            raise InvalidModeName(f"Mode name must be a string, got {name!r}.")

        shapes = _validate_shapes(mode.get("shapes"))
        rules = _validate_rules(mode.get("rules"), [shape.id for shape in shapes])

        self._mode = GameMode.freeze(mode_id, name, shapes, rules)
        self._labels = {shape.id: shape.label for shape in shapes}
        _LOGGER.debug("Game mode %r installed (%d shapes)", mode_id, len(shapes))

    def get_random_shape_id(self) -> str:
        """Pick a shape id uniformly at random from the active mode."""
        return self._rng.choice(self._require_mode().shapes).id

    def get_label(self, shape_id: str) -> str:
        self._require_mode()
        return self._labels[shape_id]

    def get_all_shapes(self) -> list[Shape]:
        """Return the shapes of the active mode in declaration order."""
        return list(self._require_mode().shapes)

    # ── Rounds ───────────────────────────────────────────────────────────

    def check(self, first: str, second: str) -> Outcome:
        """Resolve a round without touching the score.

        The first party's win condition is evaluated first, so a rule
        table in which two shapes beat each other favours *first*.
        """
        mode = self._require_mode()
        if second in mode.beats(first):
            return Outcome.FIRST_WINS
        if first in mode.beats(second):
            return Outcome.SECOND_WINS
        return Outcome.TIE

    def play(self, first: str, second: str) -> Outcome:
        """Resolve a round and credit the winner."""
        outcome = self.check(first, second)
        if outcome == Outcome.FIRST_WINS:
            self._score1 += 1
        elif outcome == Outcome.SECOND_WINS:
            self._score2 += 1
        return outcome

    def reset(self) -> None:
        """Zero both scores; the active mode is kept."""
        self._score1 = 0
        self._score2 = 0

    # ── Internal helpers ─────────────────────────────────────────────────

    def _require_mode(self) -> GameMode:
        if self._mode is None:
            raise RuntimeError("No game mode set")
        return self._mode


def _validate_shapes(shapes: object) -> list[Shape]:
    if not isinstance(shapes, Sequence) or isinstance(shapes, (str, bytes)):
        raise InvalidShapeCollection(
            f"Invalid shape type: {type(shapes).__name__}."
        )
    if len(shapes) < MIN_SHAPES:
        raise InsufficientShapes(len(shapes))

    parsed = [_parse_shape(element) for element in shapes]

    seen_ids: set[str] = set()
    for shape in parsed:
        if shape.id in seen_ids:
            raise DuplicateShapeId(shape.id)
        seen_ids.add(shape.id)

    seen_labels: set[str] = set()
    for shape in parsed:
        if shape.label in seen_labels:
            raise DuplicateShapeLabel(shape.label)
        seen_labels.add(shape.label)

    return parsed


def _parse_shape(element: object) -> Shape:
    if isinstance(element, Shape):
        shape_id, label = element.id, element.label
    elif isinstance(element, Mapping):
        shape_id, label = element.get("id"), element.get("label")
    else:
        raise InvalidShapeElement(f"Invalid shape element: {element!r}.")
    if not (isinstance(shape_id, str) and shape_id):
        raise InvalidShapeElement(f"Invalid shape element: {element!r}.")
    if not (isinstance(label, str) and label):
        raise InvalidShapeElement(f"Invalid shape element: {element!r}.")
    return Shape(shape_id, label)


def _validate_rules(rules: object, shape_ids: list[str]) -> Mapping[str, Any]:
    if not isinstance(rules, Mapping) or not rules:
        raise InvalidRuleCollection("Invalid rules type.")
    for key, values in rules.items():
        if not isinstance(values, Collection) or isinstance(values, (str, bytes)):
            raise InvalidRuleCollection(
                f"Rule for {key!r} must be a collection of shape ids."
            )

    declared = frozenset(shape_ids)
    for key in rules:
        if not isinstance(key, str) or key not in declared:
            raise InvalidRuleReference(key)
    for values in rules.values():
        for value in values:
            if not isinstance(value, str) or value not in declared:
                raise InvalidRuleReference(value)

    winners = frozenset(rules)
    losers = frozenset(value for values in rules.values() for value in values)
    never_winning = declared - winners
    never_losing = declared - losers
    if never_winning or never_losing:
        raise IncompleteCoverage(never_winning, never_losing)
    return rules


__all__ = ["MIN_SHAPES", "RuleEngine"]
