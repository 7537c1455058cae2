"""
Profile Entity - Public identity attributes of a member.

Profiles are owned by the profile store and only read here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from alumni_connect.domain.value_objects.user_id import UserId


class UserType(str, Enum):
    STUDENT = "student"
    ALUMNI = "alumni"


@dataclass
class Profile:
    id: UserId
    full_name: str
    degree: str
    user_type: Optional[UserType] = None
    location: Optional[str] = None
    graduation_year: Optional[str] = None
    current_year: Optional[str] = None
    linkedin_url: Optional[str] = None

    @property
    def initials(self) -> str:
        return "".join(part[0] for part in self.full_name.split() if part).upper()

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on the full name."""
        return search.lower() in self.full_name.lower()
