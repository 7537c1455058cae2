"""Error text shown by the client sessions."""

import logging

from alumni_connect.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    QueryFailureError,
)

logger = logging.getLogger(__name__)

KNOWN_ERRORS = (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    QueryFailureError,
)


def describe_error(exc: Exception, fallback: str) -> str:
    """Domain errors carry user-facing text; anything else gets the fallback."""
    if isinstance(exc, KNOWN_ERRORS):
        return str(exc)
    logger.exception(f"Unexpected error: {fallback}")
    return fallback
