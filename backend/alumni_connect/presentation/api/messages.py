"""
Messages API Router - Load a thread and send messages.

Sending always answers with the reloaded thread, read back from the store
after the insert.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel

from alumni_connect.application.commands.chat import (
    SendMessageCommand,
    SendMessageHandler,
)
from alumni_connect.application.queries.chat import (
    LoadMessagesQuery,
    LoadMessagesHandler,
)
from alumni_connect.application.dto import MessageDTO, to_message_dto
from alumni_connect.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    QueryFailureError,
)
from alumni_connect.domain.value_objects.conversation_id import ConversationId
from alumni_connect.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class SendMessageRequest(BaseModel):
    content: str


class ThreadResponse(BaseModel):
    conversation_id: str
    messages: list[MessageDTO]


class SendMessageResponse(BaseModel):
    """
    sent is false when the content was blank or over the length cap; nothing
    was written then and messages is null.
    """

    sent: bool
    messages: Optional[list[MessageDTO]] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["messages"])


def _parse_conversation_id(conversation_id: str) -> ConversationId:
    try:
        return ConversationId(conversation_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(e)
        ) from e


@router.get(
    "/{conversation_id}/messages",
    response_model=ThreadResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def load_messages(
    conversation_id: str,
    handler: FromDishka[LoadMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Get the whole thread, oldest message first."""
    conv_id = _parse_conversation_id(conversation_id)
    try:
        messages = await handler.execute(
            LoadMessagesQuery(conversation_id=conv_id, viewer_id=current_user.id)
        )
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except QueryFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        ) from e

    return ThreadResponse(
        conversation_id=conv_id.value,
        messages=[to_message_dto(m) for m in messages],
    )


@router.post(
    "/{conversation_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Send a message as the current user and return the reloaded thread."""
    conv_id = _parse_conversation_id(conversation_id)
    try:
        result = await handler.execute(
            SendMessageCommand(
                conversation_id=conv_id,
                sender_id=current_user.id,
                content=request.content,
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except QueryFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        ) from e

    if not result.sent:
        return SendMessageResponse(sent=False)
    return SendMessageResponse(
        sent=True,
        messages=[to_message_dto(m) for m in result.thread],
    )
