"""Abstract interfaces for the game layer.

The controller depends on :class:`INarrator`, not on a concrete view, so
any presentation layer (the headless chat view, a test double, a widget
front end) can narrate the rounds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roshambo.core.modes import Shape


class INarrator(ABC):
    """Presentation command surface driven by the controller.

    Every ``do_*`` method schedules its effect *delay_ms* after the
    previously scheduled one instead of acting immediately.
    """

    @abstractmethod
    def run(self) -> None:
        """Start the internal clock that plays scheduled commands."""

    @abstractmethod
    def reset(self) -> None:
        """Drop every command that has not been played yet."""

    @abstractmethod
    def do_clean_chat(self, delay_ms: float = 0) -> None:
        """Clear the whole transcript."""

    @abstractmethod
    def do_add_player_message(self, message: str, delay_ms: float = 0) -> None:
        """Add a bubble on the player's side."""

    @abstractmethod
    def do_add_pc_message(self, message: str, delay_ms: float = 0) -> None:
        """Add a bubble on the computer's side."""

    @abstractmethod
    def do_add_divider(self, message: str, delay_ms: float = 0) -> None:
        """Add a divider (the running score) after the last bubble."""

    @abstractmethod
    def do_lock_footer(self, delay_ms: float = 0) -> None:
        """Stop accepting plays."""

    @abstractmethod
    def do_unlock_footer(self, delay_ms: float = 0) -> None:
        """Accept plays again."""

    @abstractmethod
    def do_show_footer(self, buttons: Sequence[Shape], delay_ms: float = 0) -> None:
        """Show the footer with one button per entry of *buttons*."""

    @abstractmethod
    def do_hide_footer(self, delay_ms: float = 0) -> None:
        """Hide the footer buttons."""

    @abstractmethod
    def do_show_loading(self, delay_ms: float = 0) -> None:
        """Show the typing indicator (at most one at a time)."""

    @abstractmethod
    def do_hide_loading(self, delay_ms: float = 0) -> None:
        """Remove the typing indicator."""
