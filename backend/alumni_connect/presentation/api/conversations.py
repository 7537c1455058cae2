"""
Conversations API Router - Inbox listing and find-or-create.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, Field

from alumni_connect.application.commands.conversations import (
    ResolveConversationCommand,
    ResolveConversationHandler,
)
from alumni_connect.application.queries.conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from alumni_connect.application.dto import ConversationListDTO, to_conversation_dto
from alumni_connect.domain.exceptions import DomainValidationError, QueryFailureError
from alumni_connect.domain.value_objects.user_id import UserId
from alumni_connect.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class ResolveConversationRequest(BaseModel):
    """Request body for opening a conversation with another member."""

    other_user_id: str = Field(min_length=1)


class ResolveConversationResponse(BaseModel):
    id: str


# ==================== ROUTER ====================

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.post(
    "/resolve",
    response_model=ResolveConversationResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def resolve_conversation(
    request: ResolveConversationRequest,
    handler: FromDishka[ResolveConversationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Return the conversation shared with another member, creating it on first contact."""
    try:
        command = ResolveConversationCommand(
            current_user_id=current_user.id,
            other_user_id=UserId(request.other_user_id),
        )
        conversation_id = await handler.execute(command)
        return ResolveConversationResponse(id=conversation_id.value)
    except DomainValidationError as e:
        raise HTTPException(
            status_code=422, detail=str(e)
        ) from e
    except QueryFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        ) from e


@router.get(
    "",
    response_model=ConversationListDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    handler: FromDishka[ListConversationsHandler],
    current_user: AuthUser = Depends(get_current_user),
    search: str = "",
):
    """
    List the current user's conversations, most recently active first.

    Response:
    {
        "conversations": [
            {"id": "uuid", "participants": [...], "last_message": {...}, "updated_at": "ISO"},
            ...
        ]
    }
    """
    try:
        conversations = await handler.execute(
            ListConversationsQuery(user_id=current_user.id, search=search)
        )
    except QueryFailureError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        ) from e

    return ConversationListDTO(
        conversations=[to_conversation_dto(c) for c in conversations]
    )
