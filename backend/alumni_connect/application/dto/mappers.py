"""Entity to DTO mapping."""

from typing import Optional

from alumni_connect.application.dto.chat import MessageDTO
from alumni_connect.application.dto.conversation import (
    ConversationDTO,
    MessagePreviewDTO,
    ParticipantDTO,
)
from alumni_connect.application.dto.profile import ProfileDTO
from alumni_connect.domain.entities.conversation import Conversation
from alumni_connect.domain.entities.message import Message
from alumni_connect.domain.entities.profile import Profile


def to_profile_dto(profile: Optional[Profile]) -> Optional[ProfileDTO]:
    if profile is None:
        return None
    return ProfileDTO(
        id=profile.id.value,
        full_name=profile.full_name,
        user_type=profile.user_type.value if profile.user_type else None,
        degree=profile.degree,
        initials=profile.initials,
    )


def to_message_dto(message: Message) -> MessageDTO:
    return MessageDTO(
        id=message.id.value,
        conversation_id=message.conversation_id.value,
        sender_id=message.sender_id.value,
        content=message.content,
        created_at=message.created_at,
        sender=to_profile_dto(message.sender),
    )


def to_conversation_dto(conversation: Conversation) -> ConversationDTO:
    return ConversationDTO(
        id=conversation.id.value,
        participants=[
            ParticipantDTO(user_id=p.user_id.value, profile=to_profile_dto(p.profile))
            for p in conversation.participants
        ],
        last_message=(
            MessagePreviewDTO(
                content=conversation.last_message.content,
                created_at=conversation.last_message.created_at,
            )
            if conversation.last_message
            else None
        ),
        updated_at=conversation.updated_at,
    )
