"""
ConversationParticipant Entity - A user's membership in a conversation.
"""

from dataclasses import dataclass
from typing import Optional

from alumni_connect.domain.entities.profile import Profile
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId


@dataclass
class ConversationParticipant:
    conversation_id: ConversationId
    user_id: UserId
    profile: Optional[Profile] = None
