"""Roshambo — a configurable "beats" game with scheduled chat narration."""

__version__ = "0.1.0"
