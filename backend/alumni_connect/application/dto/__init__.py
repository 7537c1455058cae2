"""
DTOs - Data Transfer Objects

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from alumni_connect.application.dto.chat import MessageDTO
from alumni_connect.application.dto.conversation import (
    ConversationDTO,
    ConversationListDTO,
    MessagePreviewDTO,
    ParticipantDTO,
)
from alumni_connect.application.dto.profile import ProfileDTO
from alumni_connect.application.dto.mappers import (
    to_conversation_dto,
    to_message_dto,
    to_profile_dto,
)

__all__ = [
    "MessageDTO",
    "ConversationDTO",
    "ConversationListDTO",
    "MessagePreviewDTO",
    "ParticipantDTO",
    "ProfileDTO",
    "to_conversation_dto",
    "to_message_dto",
    "to_profile_dto",
]
