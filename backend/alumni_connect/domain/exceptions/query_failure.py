"""
QueryFailureError - Raised when a read or write against the store fails.
Maps to: HTTP 503 Service Unavailable

Repositories wrap the client's own errors in this type so that the layers
above never depend on the persistence library.
"""


class QueryFailureError(Exception):
    """Exception raised when the backing store rejects or fails a query."""

    def __init__(self, message: str = "Error talking to the data store"):
        super().__init__(message)
        self.message = message
