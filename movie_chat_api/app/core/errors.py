"""
Error taxonomy shared by the store, the chat service and the API layer.

Every error carries a ``kind`` (reported to clients verbatim), the HTTP
status it maps to and a human-readable message.  Errors are raised
where they originate and travel unchanged up to the exception handler
registered in ``main``.
"""

from fastapi import status


class ChatError(Exception):
    """Base class for all errors surfaced to API clients."""

    kind = "ChatError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class MalformedRequest(ChatError):
    """The request could not be parsed into the expected shape."""

    kind = "MalformedRequest"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidContent(ChatError):
    """Message content is empty or blank."""

    kind = "InvalidContent"
    status_code = status.HTTP_400_BAD_REQUEST


class MovieNotFound(ChatError):
    """The referenced movie does not exist."""

    kind = "MovieNotFound"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, movie_id: int) -> None:
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id


class StorageUnavailable(ChatError):
    """The database could not complete the operation.  Safe to retry."""

    kind = "StorageUnavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
