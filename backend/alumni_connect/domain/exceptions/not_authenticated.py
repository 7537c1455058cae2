"""
NotAuthenticatedError - Raised when no current user id is available.
Maps to: HTTP 401 Unauthorized. Callers redirect to login; never retried.
"""


class NotAuthenticatedError(Exception):
    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)
