"""Headless chat transcript the narration commands act upon."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum

from roshambo.core.modes import Shape


class EntryKind(StrEnum):
    """Kind of transcript row."""

    PC = "pc"
    PLAYER = "player"
    DIVIDER = "divider"
    LOADING = "loading"


@dataclass(frozen=True, slots=True)
class ChatEntry:
    kind: EntryKind
    text: str = ""


EntryCallback = Callable[[ChatEntry], None]
FooterCallback = Callable[["ChatLog"], None]


@dataclass
class ChatListeners:
    """Observable callbacks. Multiple handlers per event."""

    on_entry: list[EntryCallback] = field(default_factory=list)
    on_cleared: list[Callable[[], None]] = field(default_factory=list)
    on_footer_changed: list[FooterCallback] = field(default_factory=list)


class ChatLog:
    """Ordered chat rows plus the footer (the play buttons) state.

    Footer mutators are idempotent: hiding a hidden footer or locking a
    locked one changes nothing and notifies nobody.
    """

    __slots__ = ("_entries", "_footer_hidden", "_footer_locked", "_buttons", "listeners")

    def __init__(self) -> None:
        self._entries: list[ChatEntry] = []
        self._footer_hidden = False
        self._footer_locked = False
        self._buttons: tuple[Shape, ...] = ()
        self.listeners = ChatListeners()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def entries(self) -> tuple[ChatEntry, ...]:
        return tuple(self._entries)

    @property
    def footer_hidden(self) -> bool:
        return self._footer_hidden

    @property
    def footer_locked(self) -> bool:
        return self._footer_locked

    @property
    def buttons(self) -> tuple[Shape, ...]:
        return self._buttons

    @property
    def accepts_play(self) -> bool:
        """Whether a button press would currently reach the controller."""
        return not self._footer_hidden and not self._footer_locked and bool(self._buttons)

    @property
    def has_loading(self) -> bool:
        return any(entry.kind == EntryKind.LOADING for entry in self._entries)

    def texts(self, kind: EntryKind | None = None) -> list[str]:
        """Texts of every row, optionally only those of *kind*."""
        return [e.text for e in self._entries if kind is None or e.kind == kind]

    # ── Transcript ───────────────────────────────────────────────────────

    def clear(self) -> None:
        self._entries.clear()
        for cb in self.listeners.on_cleared:
            cb()

    def append(self, kind: EntryKind, text: str = "") -> None:
        entry = ChatEntry(kind, text)
        self._entries.append(entry)
        for cb in self.listeners.on_entry:
            cb(entry)

    def add_loading(self) -> None:
        if not self.has_loading:
            self.append(EntryKind.LOADING)

    def remove_loading(self) -> None:
        self._entries = [e for e in self._entries if e.kind != EntryKind.LOADING]

    # ── Footer ───────────────────────────────────────────────────────────

    def show_footer(self, buttons: Sequence[Shape]) -> None:
        self._footer_hidden = False
        self._buttons = tuple(buttons)
        self._emit_footer()

    def hide_footer(self) -> None:
        if not self._footer_hidden:
            self._footer_hidden = True
            self._emit_footer()

    def lock_footer(self) -> None:
        if not self._footer_locked:
            self._footer_locked = True
            self._emit_footer()

    def unlock_footer(self) -> None:
        if self._footer_locked:
            self._footer_locked = False
            self._emit_footer()

    def _emit_footer(self) -> None:
        for cb in self.listeners.on_footer_changed:
            cb(self)
