"""
Shared fixtures: a fake clock, a scripted TMDb stand-in and a wired app.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from movie_gateway.api.app import create_app
from movie_gateway.repositories import InMemoryCacheRepository, JsonFavoritesRepository
from movie_gateway.services import (
    FavoritesService,
    GatewayService,
    ImageProxyService,
    UpstreamClient,
)

API_BASE = "https://api.tmdb.test/3"
CDN_BASE = "https://image.tmdb.test"
API_KEY = "test-key"
TTL = 86400


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTMDb:
    """Scripted upstream: maps URL paths to responses and records every request.

    A route value may be an httpx.Response, an exception to raise, or a
    callable taking the request.
    """

    def __init__(self) -> None:
        self.routes: dict = {}
        self.requests: list[httpx.Request] = []

    def route(self, path: str, result) -> None:
        self.routes[path] = result

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.routes.get(request.url.path)
        if result is None:
            return httpx.Response(404, json={"status_message": "not found"})
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(request)
        # Fresh unread stream per call so one scripted response can be served repeatedly.
        return httpx.Response(
            result.status_code,
            headers=result.headers,
            stream=httpx.ByteStream(result.content),
        )

    def calls(self, path: str) -> int:
        return sum(1 for request in self.requests if request.url.path == path)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tmdb():
    return FakeTMDb()


@pytest.fixture
def cdn():
    return FakeTMDb()


@pytest.fixture
def cache(clock):
    return InMemoryCacheRepository(ttl=TTL, clock=clock)


@pytest.fixture
def upstream(tmdb):
    return UpstreamClient(
        api_key=API_KEY,
        base_url=API_BASE,
        language="ru-RU",
        client=httpx.AsyncClient(transport=tmdb.transport),
    )


@pytest.fixture
def gateway(cache, upstream):
    return GatewayService.create(cache=cache, upstream=upstream)


@pytest.fixture
def image_proxy(cdn):
    return ImageProxyService(
        base_url=CDN_BASE,
        size="w500",
        client=httpx.AsyncClient(transport=cdn.transport),
    )


@pytest.fixture
def favorites_path(tmp_path):
    return tmp_path / "favorites.json"


@pytest.fixture
def favorites_repo(favorites_path):
    return JsonFavoritesRepository(path=favorites_path)


@pytest.fixture
def client(gateway, favorites_repo, image_proxy):
    """Create a test client with every upstream faked."""
    app = create_app(
        gateway_service=gateway,
        favorites_service=FavoritesService.create(favorites_repo),
        image_proxy=image_proxy,
    )
    with TestClient(app) as test_client:
        yield test_client
