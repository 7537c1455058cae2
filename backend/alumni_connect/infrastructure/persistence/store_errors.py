"""Translate Prisma client errors into domain errors."""

import logging
from contextlib import contextmanager

from prisma.errors import PrismaError

from alumni_connect.domain.exceptions import QueryFailureError
from alumni_connect.observability import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str):
    """Wrap a block of Prisma calls; any client error becomes QueryFailureError."""
    try:
        yield
    except PrismaError as e:
        increment_error(MetricsErrorType.QUERY_FAILED)
        logger.error(f"[{operation}] store query failed: {e}")
        raise QueryFailureError(f"Could not {operation}. Please try again.") from e
