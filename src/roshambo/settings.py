"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    game_mode: str = "classical"  # built-in name or path to a JSON mode file
    player_mode: bool = True  # False = computer vs computer
    rounds: int = 3
    seed: int | None = None

    # Pacing
    tick_interval_ms: int = 16
    autoplay_delay_ms: int = 400

    # Diagnostics
    log_level: str = "INFO"
