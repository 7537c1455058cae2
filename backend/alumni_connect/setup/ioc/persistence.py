"""
Prisma bindings for the repository ports.
"""

import logging
from typing import AsyncIterator

from dishka import Provider, Scope, provide
from prisma import Prisma

from alumni_connect.domain.ports.repositories import (
    ConversationRepository,
    MessageRepository,
)
from alumni_connect.infrastructure.persistence import (
    PrismaConversationRepository,
    PrismaMessageRepository,
)

logger = logging.getLogger(__name__)


class PersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterator[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    @provide(scope=Scope.REQUEST)
    def get_conversation_repository(self, prisma: Prisma) -> ConversationRepository:
        """
        - Return type is ABSTRACT (ConversationRepository)
        - Implementation is CONCRETE (PrismaConversationRepository)
        """
        return PrismaConversationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)
