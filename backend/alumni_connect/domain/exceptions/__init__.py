"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by the
presentation layer (HTTP status codes) or by the client sessions (error text).
"""

from alumni_connect.domain.exceptions.entity_not_found import EntityNotFoundError
from alumni_connect.domain.exceptions.access_denied import AccessDeniedError
from alumni_connect.domain.exceptions.validation_error import DomainValidationError
from alumni_connect.domain.exceptions.not_authenticated import NotAuthenticatedError
from alumni_connect.domain.exceptions.query_failure import QueryFailureError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "NotAuthenticatedError",
    "QueryFailureError",
]
