"""
Pydantic schemas for chat messages.

``ChatMessageCreate`` is the wire shape of ``POST /chat``: both fields
are required and strictly typed, so ``"1"`` is not accepted for
``movie_id`` and ``42`` is not accepted for ``content``.  Blank content
passes this shape check; it is rejected by the store as invalid
content rather than as a malformed request.
"""

from pydantic import BaseModel, StrictInt, StrictStr


class ChatMessageCreate(BaseModel):
    """Body of a request that posts a message to a movie's chat."""

    movie_id: StrictInt
    content: StrictStr


class ChatMessageRead(BaseModel):
    """A stored chat message."""

    id: int
    movie_id: int
    content: str
    created_at: str


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    error: str
    message: str
