"""
Chat endpoints for API v1.

``POST /chat`` takes ``{"movie_id": <int>, "content": <str>}`` and
returns the stored message with status 201.  ``GET /chat/{movie_id}``
returns the messages of a movie, oldest first.

The POST body is read raw and validated by the chat service so that
shape errors are reported as ``MalformedRequest`` rather than
FastAPI's default 422 response.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from movie_chat_api.app.api.deps import get_chat_service
from movie_chat_api.app.schemas.chat import ChatMessageRead, ErrorResponse
from movie_chat_api.app.services.chat_service import ChatService

router = APIRouter()


@router.post(
    "",
    response_model=ChatMessageRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def post_message(
    request: Request,
    service: ChatService = Depends(get_chat_service),
) -> ChatMessageRead:
    """Post a message to a movie's chat."""
    raw_body = await request.body()
    return await service.handle_post_message(None, raw_body)


@router.get(
    "/{movie_id}",
    response_model=List[ChatMessageRead],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def list_messages(
    movie_id: int,
    service: ChatService = Depends(get_chat_service),
) -> List[ChatMessageRead]:
    """Return the messages posted for ``movie_id``, ordered by id."""
    return await service.handle_list_messages(movie_id)
