"""
Resolve Conversation Command - Find or create the conversation shared by two users.

Steps:
1. Fetch the ids of every conversation the current user takes part in
2. If there are any, look for the other user among their participants
3. A match is the shared conversation (there is at most one per pair)
4. Otherwise create a conversation, then add both participants in one batch

Concurrency:
    Two first-contact calls for the same pair can both miss in step 2 and both
    create a conversation. Nothing in the store prevents that duplicate.

Failure:
    Store errors propagate. If adding the participants fails after the
    conversation row was created, that row stays behind as an orphan; it is
    logged and the caller is expected to offer a retry.
"""

import logging
from dataclasses import dataclass

from alumni_connect.application.common.interfaces import Command, CommandHandler
from alumni_connect.domain.exceptions import DomainValidationError
from alumni_connect.domain.ports.repositories import ConversationRepository
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.observability import (
    MetricsErrorType,
    increment_conversations_created,
    increment_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolveConversationCommand(Command[ConversationId]):
    current_user_id: UserId
    other_user_id: UserId


class ResolveConversationHandler(CommandHandler[ConversationId]):
    _conversation_repository: ConversationRepository

    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    async def execute(self, command: ResolveConversationCommand) -> ConversationId:
        current_user_id = command.current_user_id
        other_user_id = command.other_user_id
        if current_user_id == other_user_id:
            raise DomainValidationError("Cannot start a conversation with yourself.")

        conversation_ids = await self._conversation_repository.get_ids_for_user(
            current_user_id
        )
        if conversation_ids:
            shared = await self._conversation_repository.find_with_participant(
                conversation_ids, other_user_id
            )
            if shared:
                logger.debug(
                    f"Found conversation {shared} for {current_user_id} and {other_user_id}"
                )
                return shared

        conversation_id = await self._conversation_repository.create()
        try:
            await self._conversation_repository.add_participants(
                conversation_id, [current_user_id, other_user_id]
            )
        except Exception:
            increment_error(MetricsErrorType.ORPHAN_CONVERSATION)
            logger.error(
                f"Conversation {conversation_id} was created without participants "
                f"for {current_user_id} and {other_user_id}"
            )
            raise

        increment_conversations_created()
        logger.info(
            f"Created conversation {conversation_id} for {current_user_id} and {other_user_id}"
        )
        return conversation_id
