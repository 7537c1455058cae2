"""Conversation commands."""

from .resolve_conversation import (
    ResolveConversationCommand,
    ResolveConversationHandler,
)

__all__ = [
    "ResolveConversationCommand",
    "ResolveConversationHandler",
]
