"""
Catalog endpoints for API v1.

The catalog is read-only: clients list it to discover which movie
identifiers they can chat about.
"""

from typing import List

from fastapi import APIRouter, Depends

from movie_chat_api.app.api.deps import get_chat_service
from movie_chat_api.app.schemas.chat import ErrorResponse
from movie_chat_api.app.schemas.movie import MovieRead
from movie_chat_api.app.services.chat_service import ChatService

router = APIRouter()


@router.get(
    "",
    response_model=List[MovieRead],
    responses={503: {"model": ErrorResponse}},
)
async def list_movies(service: ChatService = Depends(get_chat_service)) -> List[MovieRead]:
    """Return all movies ordered by id."""
    return await service.handle_list_movies()
