"""Chat-related queries."""

from alumni_connect.application.queries.chat.load_messages import (
    LoadMessagesQuery,
    LoadMessagesHandler,
)

__all__ = [
    "LoadMessagesQuery",
    "LoadMessagesHandler",
]
