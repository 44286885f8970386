"""
Service layer for the movie chat.

``ChatService`` sits between the HTTP endpoints and ``ChatStore``.  It
validates the shape of incoming payloads, delegates to the store and
maps the results to response schemas.  Store errors are propagated
unchanged; the only error originating here is ``MalformedRequest``.

``POST /chat`` carries the movie identifier in the body::

    {"movie_id": 1, "content": "great movie"}

The service holds no per-request state and may be shared across
concurrent requests.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from pydantic import ValidationError

from movie_chat_api.app.core.errors import MalformedRequest
from movie_chat_api.app.schemas.chat import ChatMessageCreate, ChatMessageRead
from movie_chat_api.app.schemas.movie import MovieRead
from movie_chat_api.app.services.store import ChatStore

logger = logging.getLogger(__name__)


class ChatService:
    """Request handling for the catalog and movie chats."""

    def __init__(self, store: ChatStore, image_base_url: str = "") -> None:
        self.store = store
        self.image_base_url = image_base_url.rstrip("/")

    async def handle_list_movies(self) -> List[MovieRead]:
        """Return the catalog with image paths expanded to full URLs."""
        movies = self.store.list_movies()
        return [self._with_image_urls(movie) for movie in movies]

    async def handle_post_message(
        self, movie_id: Optional[int], raw_body: Union[bytes, str]
    ) -> ChatMessageRead:
        """Parse ``raw_body`` and store the message it describes.

        ``movie_id`` is normally ``None`` and the movie is taken from
        the body.  A caller that already knows the movie may pass it; a
        body naming a different movie is then rejected as malformed.
        """
        payload = self.parse_message_body(raw_body)
        if movie_id is not None and payload.movie_id != movie_id:
            raise MalformedRequest(
                f"Body movie_id {payload.movie_id} does not match movie {movie_id}"
            )
        return self.store.insert_message(payload.movie_id, payload.content)

    async def handle_list_messages(self, movie_id: int) -> List[ChatMessageRead]:
        return self.store.list_messages(movie_id)

    @staticmethod
    def parse_message_body(raw_body: Union[bytes, str]) -> ChatMessageCreate:
        """Validate ``raw_body`` as a ``ChatMessageCreate`` JSON object."""
        if not raw_body:
            raise MalformedRequest("Request body is empty")
        try:
            return ChatMessageCreate.model_validate_json(raw_body)
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
                for err in exc.errors()
            )
            logger.info("Rejected malformed message body: %s", problems)
            raise MalformedRequest(f"Invalid message payload: {problems}") from exc

    def _with_image_urls(self, movie: MovieRead) -> MovieRead:
        if not self.image_base_url:
            return movie
        updates = {}
        if movie.backdrop_path:
            updates["backdrop_path"] = f"{self.image_base_url}{movie.backdrop_path}"
        if movie.poster_path:
            updates["poster_path"] = f"{self.image_base_url}{movie.poster_path}"
        return movie.model_copy(update=updates)
