"""
Tests for the movie gateway API.
"""

import httpx

DISCOVER_PAGE = {
    "page": 1,
    "results": [{"id": 550, "title": "Fight Club"}],
    "total_pages": 3,
    "total_results": 60,
}


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "TMDb proxy is up"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cache_healthy": True}


def test_genres(client, tmdb):
    genres = [{"id": 28, "name": "боевик"}, {"id": 35, "name": "комедия"}]
    tmdb.route("/3/genre/movie/list", httpx.Response(200, json={"genres": genres}))

    first = client.get("/genre/movie/list")
    second = client.get("/genre/movie/list")

    assert first.status_code == 200
    assert first.json() == {"genres": genres}
    assert second.json() == {"genres": genres}
    assert tmdb.calls("/3/genre/movie/list") == 1


def test_genres_fetch_failure(client, tmdb):
    tmdb.route("/3/genre/movie/list", httpx.ConnectError("connection refused"))

    response = client.get("/genre/movie/list")

    assert response.status_code == 500
    assert "Could not fetch genres" in response.json()["detail"]


def test_genres_wrong_shape(client, tmdb):
    tmdb.route("/3/genre/movie/list", httpx.Response(200, json={"genres": "Action"}))

    response = client.get("/genre/movie/list")

    assert response.status_code == 502


def test_discover_is_cached_and_identical(client, tmdb):
    tmdb.route("/3/discover/movie", httpx.Response(200, json=DISCOVER_PAGE))

    first = client.get("/discover/movie?with_genres=18&page=1")
    second = client.get("/discover/movie?page=1&with_genres=18")

    assert first.status_code == 200
    assert first.content == second.content
    assert first.json() == DISCOVER_PAGE
    assert tmdb.calls("/3/discover/movie") == 1


def test_discover_forwards_query(client, tmdb):
    tmdb.route("/3/discover/movie", httpx.Response(200, json=DISCOVER_PAGE))

    client.get("/discover/movie?sort_by=vote_average.desc&language=en-US")

    sent = tmdb.requests[0].url.params
    assert sent["sort_by"] == "vote_average.desc"
    assert sent["language"] == "en-US"
    assert sent["api_key"] == "test-key"


def test_discover_keeps_repeated_parameters(client, tmdb):
    tmdb.route("/3/discover/movie", httpx.Response(200, json=DISCOVER_PAGE))

    client.get("/discover/movie?with_genres=28&with_genres=35")
    client.get("/discover/movie?with_genres=35")

    assert tmdb.requests[0].url.params.get_list("with_genres") == ["28", "35"]
    assert tmdb.requests[1].url.params.get_list("with_genres") == ["35"]
    assert tmdb.calls("/3/discover/movie") == 2


def test_discover_invalid_results_is_bad_gateway(client, tmdb, gateway):
    tmdb.route("/3/discover/movie", httpx.Response(200, json={"results": 42}))

    response = client.get("/discover/movie?page=1")

    assert response.status_code == 502
    assert "results" in response.json()["detail"]
    assert gateway.cache.count() == 0


def test_discover_malformed_body(client, tmdb):
    tmdb.route("/3/discover/movie", httpx.Response(200, content=b"<!doctype html>"))

    response = client.get("/discover/movie")

    assert response.status_code == 500


def test_movie_detail(client, tmdb):
    detail = {"id": 550, "title": "Бойцовский клуб", "genres": [{"id": 18}]}
    tmdb.route("/3/movie/550", httpx.Response(200, json=detail))

    response = client.get("/movie/550")

    assert response.status_code == 200
    assert response.json() == detail


def test_movie_detail_upstream_error_status(client, tmdb, gateway):
    response = client.get("/movie/999999")

    assert response.status_code == 500
    assert gateway.cache.count() == 0


def test_get_stats(client, tmdb):
    tmdb.route("/3/movie/1", httpx.Response(200, json={"id": 1}))
    client.get("/movie/1")
    client.get("/movie/1")

    response = client.get("/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["cache"]["backend"] == "memory"
    assert data["performance"]["cache_hits"] == 1
    assert data["performance"]["upstream_calls"] == 1


def test_favorites_empty(client):
    response = client.get("/favorites/alice")
    assert response.status_code == 200
    assert response.json() == []


def test_favorites_upsert_and_list(client):
    created = client.post("/favorites/alice", json={"id": 42, "title": "First"})
    client.post("/favorites/alice", json={"id": 42, "title": "Second"})

    assert created.status_code == 201
    assert created.json() == {"success": True}
    assert client.get("/favorites/alice").json() == [{"id": 42, "title": "Second"}]


def test_favorites_remove(client):
    for movie_id in (1, 42, 7):
        client.post("/favorites/alice", json={"id": movie_id})

    response = client.delete("/favorites/alice/42")

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/favorites/alice").json() == [{"id": 1}, {"id": 7}]


def test_favorites_requires_id(client):
    response = client.post("/favorites/alice", json={"title": "No id"})
    assert response.status_code == 422


def test_favorites_corrupt_store(client, favorites_path):
    favorites_path.write_text("{broken", encoding="utf-8")

    response = client.get("/favorites/alice")

    assert response.status_code == 500
    assert "Could not read favorites" in response.json()["detail"]
