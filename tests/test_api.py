from .conftest import IMAGE_BASE_URL


def test_list_movies(client):
    response = client.get("/movies")
    assert response.status_code == 200
    movies = response.json()
    assert [m["id"] for m in movies] == [1, 2]
    assert movies[0]["title"] == "Inception"
    assert movies[0]["poster_path"] == f"{IMAGE_BASE_URL}/inception.jpg"


def test_post_message_created(client):
    response = client.post("/chat", json={"movie_id": 1, "content": "great movie"})
    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["movie_id"] == 1
    assert body["content"] == "great movie"
    assert body["created_at"]


def test_post_message_unknown_movie(client):
    response = client.post("/chat", json={"movie_id": 999, "content": "hi"})
    assert response.status_code == 404
    assert response.json()["error"] == "MovieNotFound"


def test_post_message_empty_content(client):
    response = client.post("/chat", json={"movie_id": 1, "content": ""})
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidContent"


def test_post_message_malformed(client):
    response = client.post("/chat", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "MalformedRequest"
    assert body["message"]


def test_post_message_missing_content(client):
    response = client.post("/chat", json={"movie_id": 1})
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedRequest"


def test_list_messages_after_post(client):
    created = client.post("/chat", json={"movie_id": 1, "content": "great movie"}).json()
    client.post("/chat", json={"movie_id": 1, "content": "agreed"})

    response = client.get("/chat/1")
    assert response.status_code == 200
    messages = response.json()
    assert messages[0] == created
    assert [m["content"] for m in messages] == ["great movie", "agreed"]


def test_list_messages_empty(client):
    response = client.get("/chat/2")
    assert response.status_code == 200
    assert response.json() == []


def test_list_messages_unknown_movie(client):
    response = client.get("/chat/999")
    assert response.status_code == 404
    assert response.json() == {"error": "MovieNotFound", "message": "Movie 999 not found"}


def test_list_messages_non_integer_id(client):
    response = client.get("/chat/abc")
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedRequest"


def test_storage_unavailable(client):
    client.app.state.db.close()
    response = client.get("/movies")
    assert response.status_code == 503
    assert response.json()["error"] == "StorageUnavailable"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_cors_preflight(client):
    response = client.options(
        "/chat",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_post_message_movie_id_beyond_integer_range(client):
    response = client.post("/chat", content=b'{"movie_id": 99999999999999999999999, "content": "hi"}')
    assert response.status_code == 404
    assert response.json()["error"] == "MovieNotFound"


def test_list_messages_movie_id_beyond_integer_range(client):
    response = client.get("/chat/99999999999999999999999")
    assert response.status_code == 404
    assert response.json()["error"] == "MovieNotFound"
