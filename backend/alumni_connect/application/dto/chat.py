"""Chat DTOs for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from alumni_connect.application.dto.profile import ProfileDTO


class MessageDTO(BaseModel):
    """DTO for message data returned to frontend."""

    id: str
    conversation_id: str
    sender_id: str
    content: str
    created_at: datetime
    sender: Optional[ProfileDTO] = None
