"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from alumni_connect.infrastructure.persistence.prisma_conversation_repository import (
    PrismaConversationRepository,
)
from alumni_connect.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

__all__ = [
    "PrismaConversationRepository",
    "PrismaMessageRepository",
]
