"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.message_id import MessageId
from alumni_connect.domain.value_objects.content_limit import (
    ContentLimit,
    MESSAGE_LIMIT,
    POST_LIMIT,
    COMMENT_LIMIT,
)

__all__ = [
    "UserId",
    "ConversationId",
    "MessageId",
    "ContentLimit",
    "MESSAGE_LIMIT",
    "POST_LIMIT",
    "COMMENT_LIMIT",
]
