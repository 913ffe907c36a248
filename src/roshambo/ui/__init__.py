"""Presentation layer — chat transcript, view commands and the Qt tick driver."""

from roshambo.ui.actions import ChatActions
from roshambo.ui.chat_log import ChatEntry, ChatListeners, ChatLog, EntryKind
from roshambo.ui.chat_view import ChatView, monotonic_ms

__all__ = [
    "ChatActions",
    "ChatEntry",
    "ChatListeners",
    "ChatLog",
    "ChatView",
    "EntryKind",
    "monotonic_ms",
]
