import asyncio
import json

import pytest

from movie_chat_api.app.core.errors import InvalidContent, MalformedRequest, MovieNotFound
from movie_chat_api.app.services.chat_service import ChatService

from .conftest import IMAGE_BASE_URL


def run(coro):
    return asyncio.run(coro)


def test_list_movies_expands_image_paths(service):
    movies = run(service.handle_list_movies())
    inception = movies[0]
    assert inception.poster_path == f"{IMAGE_BASE_URL}/inception.jpg"
    assert inception.backdrop_path == f"{IMAGE_BASE_URL}/inception-backdrop.jpg"
    assert movies[1].poster_path is None


def test_list_movies_without_base_url_returns_raw_paths(store):
    service = ChatService(store)
    movies = run(service.handle_list_movies())
    assert movies[0].poster_path == "/inception.jpg"


def test_post_message(service):
    body = json.dumps({"movie_id": 1, "content": "great movie"}).encode()
    message = run(service.handle_post_message(None, body))
    assert message.movie_id == 1
    assert message.content == "great movie"
    assert run(service.handle_list_messages(1)) == [message]


def test_post_message_accepts_str_body(service):
    message = run(service.handle_post_message(None, '{"movie_id": 2, "content": "hi"}'))
    assert message.movie_id == 2


def test_post_message_with_matching_movie_id(service):
    message = run(service.handle_post_message(1, b'{"movie_id": 1, "content": "hi"}'))
    assert message.movie_id == 1


def test_post_message_with_conflicting_movie_id(service):
    with pytest.raises(MalformedRequest):
        run(service.handle_post_message(2, b'{"movie_id": 1, "content": "hi"}'))
    assert run(service.handle_list_messages(1)) == []


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[1, 2]",
        b'"just a string"',
        b'{"content": "no movie"}',
        b'{"movie_id": 1}',
        b'{"movie_id": "1", "content": "hi"}',
        b'{"movie_id": 1.5, "content": "hi"}',
        b'{"movie_id": 1, "content": 42}',
        b'{"movie_id": 1, "content": null}',
    ],
)
def test_post_message_malformed(service, body):
    with pytest.raises(MalformedRequest):
        run(service.handle_post_message(None, body))


def test_post_message_blank_content(service):
    with pytest.raises(InvalidContent):
        run(service.handle_post_message(None, b'{"movie_id": 1, "content": "   "}'))


def test_post_message_unknown_movie(service):
    with pytest.raises(MovieNotFound):
        run(service.handle_post_message(None, b'{"movie_id": 999, "content": "hi"}'))


def test_list_messages_unknown_movie(service):
    with pytest.raises(MovieNotFound):
        run(service.handle_list_messages(999))


def test_extra_fields_are_ignored(service):
    body = b'{"movie_id": 1, "content": "hi", "user_id": 7}'
    message = run(service.handle_post_message(None, body))
    assert message.content == "hi"
