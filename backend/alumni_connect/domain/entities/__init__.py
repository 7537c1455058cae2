"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from alumni_connect.domain.entities.profile import Profile, UserType
from alumni_connect.domain.entities.participant import ConversationParticipant
from alumni_connect.domain.entities.message import Message, MessagePreview
from alumni_connect.domain.entities.conversation import Conversation

__all__ = [
    "Profile",
    "UserType",
    "ConversationParticipant",
    "Message",
    "MessagePreview",
    "Conversation",
]
