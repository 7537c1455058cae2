"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application layer needs
- Does NOT specify implementation (Prisma, in-memory, etc.)
"""

from alumni_connect.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from alumni_connect.domain.ports.repositories.message_repository import (
    MessageRepository,
)

__all__ = [
    "ConversationRepository",
    "MessageRepository",
]
