import pytest
from fastapi.testclient import TestClient

from movie_chat_api.app.core.config import Settings
from movie_chat_api.app.core.db import open_database
from movie_chat_api.app.main import create_app
from movie_chat_api.app.services.chat_service import ChatService
from movie_chat_api.app.services.store import ChatStore
from seed_movies import seed_movies

MOVIES = [
    {
        "id": 1,
        "title": "Inception",
        "original_title": "Inception",
        "original_language": "en",
        "genre_ids": [28, 878],
        "origin_country": ["US"],
        "poster_path": "/inception.jpg",
        "backdrop_path": "/inception-backdrop.jpg",
        "popularity": 83.5,
        "vote_average": 8.4,
        "vote_count": 35000,
        "release_date": "2010-07-15",
    },
    {
        "id": 2,
        "title": "The Matrix",
        "genre_ids": [28],
        "origin_country": ["US"],
        "release_date": "1999-03-31",
    },
]

IMAGE_BASE_URL = "https://images.example/original"


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "movies.db")


@pytest.fixture
def db(db_path):
    database = open_database(db_path)
    seed_movies(database, MOVIES)
    yield database
    database.close()


@pytest.fixture
def store(db):
    return ChatStore(db)


@pytest.fixture
def service(store):
    return ChatService(store, image_base_url=IMAGE_BASE_URL)


@pytest.fixture
def client(db_path):
    seeded = open_database(db_path)
    seed_movies(seeded, MOVIES)
    seeded.close()
    app = create_app(Settings(database_url=db_path, image_base_url=IMAGE_BASE_URL))
    with TestClient(app) as test_client:
        yield test_client
