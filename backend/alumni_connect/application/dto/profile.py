"""Profile DTOs for API responses."""

from typing import Optional
from pydantic import BaseModel


class ProfileDTO(BaseModel):
    id: str
    full_name: str
    user_type: Optional[str] = None
    degree: str
    initials: str
