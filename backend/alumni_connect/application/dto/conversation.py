"""Conversation DTOs for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from alumni_connect.application.dto.profile import ProfileDTO


class ParticipantDTO(BaseModel):
    user_id: str
    profile: ProfileDTO


class MessagePreviewDTO(BaseModel):
    content: str
    created_at: datetime


class ConversationDTO(BaseModel):
    id: str
    participants: list[ParticipantDTO]
    last_message: Optional[MessagePreviewDTO] = None
    updated_at: datetime


class ConversationListDTO(BaseModel):
    conversations: list[ConversationDTO]
