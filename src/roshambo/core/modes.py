"""Game-mode value objects and the built-in mode specifications.

A mode specification is the plain JSON-shaped mapping accepted by
:meth:`RuleEngine.set_game_mode`::

    {
        "id": "classical",
        "name": "Classical",
        "shapes": [{"id": "paper", "label": "Paper"}, ...],
        "rules": {"paper": ["rock"], ...},
    }

``rules[x]`` lists the shapes that ``x`` beats.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True, slots=True)
class Shape:
    """One of the discrete choices a party may select in a round."""

    id: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "label": self.label}


@dataclass(frozen=True, slots=True)
class GameMode:
    """Validated, immutable game mode.

    Instances are built by the rule engine once a specification passed
    validation; use :meth:`to_dict` to get the wire format back.
    """

    id: str
    name: str
    shapes: tuple[Shape, ...]
    rules: Mapping[str, frozenset[str]]

    @classmethod
    def freeze(
        cls,
        mode_id: str,
        name: str,
        shapes: list[Shape],
        rules: Mapping[str, Any],
    ) -> GameMode:
        frozen_rules = MappingProxyType(
            {key: frozenset(values) for key, values in rules.items()}
        )
        return cls(mode_id, name, tuple(shapes), frozen_rules)

    @property
    def shape_ids(self) -> tuple[str, ...]:
        return tuple(shape.id for shape in self.shapes)

    def beats(self, shape_id: str) -> frozenset[str]:
        """Shapes defeated by *shape_id* (empty for unknown ids)."""
        return self.rules.get(shape_id, frozenset())

    def to_dict(self) -> dict[str, Any]:
        order = {shape_id: i for i, shape_id in enumerate(self.shape_ids)}
        return {
            "id": self.id,
            "name": self.name,
            "shapes": [shape.to_dict() for shape in self.shapes],
            "rules": {
                key: sorted(values, key=order.__getitem__)
                for key, values in self.rules.items()
            },
        }


# ── Built-in specifications ──────────────────────────────────────────────────

CLASSICAL: dict[str, Any] = {
    "id": "classical",
    "name": "Classical",
    "shapes": [
        {"id": "paper", "label": "Paper"},
        {"id": "rock", "label": "Rock"},
        {"id": "scissor", "label": "Scissor"},
    ],
    "rules": {
        "paper": ["rock"],
        "scissor": ["paper"],
        "rock": ["scissor"],
    },
}

LIZARD_SPOCK: dict[str, Any] = {
    "id": "lizard_spock",
    "name": "Rock Paper Scissors Lizard Spock",
    "shapes": [
        {"id": "rock", "label": "Rock"},
        {"id": "paper", "label": "Paper"},
        {"id": "scissor", "label": "Scissor"},
        {"id": "lizard", "label": "Lizard"},
        {"id": "spock", "label": "Spock"},
    ],
    "rules": {
        "rock": ["scissor", "lizard"],
        "paper": ["rock", "spock"],
        "scissor": ["paper", "lizard"],
        "lizard": ["spock", "paper"],
        "spock": ["scissor", "rock"],
    },
}

MODES: Mapping[str, Mapping[str, Any]] = MappingProxyType(
    {
        "classical": CLASSICAL,
        "lizard_spock": LIZARD_SPOCK,
    }
)


def builtin_mode(name: str) -> dict[str, Any]:
    """Return a private copy of the built-in specification *name*."""
    try:
        spec = MODES[name]
    except KeyError:
        raise KeyError(
            f"Unknown game mode {name!r} (available: {', '.join(MODES)})"
        ) from None
    return copy.deepcopy(dict(spec))


def load_mode_file(path: str | Path) -> Any:
    """Read a mode specification from a JSON file.

    The result is not validated; pass it to :meth:`RuleEngine.set_game_mode`.
    """
    return json.loads(Path(path).read_text(encoding="utf-8"))


__all__ = [
    "CLASSICAL",
    "GameMode",
    "LIZARD_SPOCK",
    "MODES",
    "Shape",
    "builtin_mode",
    "load_mode_file",
]
