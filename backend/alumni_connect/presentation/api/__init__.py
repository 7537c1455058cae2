"""
API Routers - FastAPI endpoint definitions.
"""

from alumni_connect.presentation.api.conversations import router as conversations_router
from alumni_connect.presentation.api.messages import router as messages_router
from alumni_connect.presentation.api.metrics import router as metrics_router

__all__ = [
    "conversations_router",
    "messages_router",
    "metrics_router",
]
