"""HTTP client for the upstream movie metadata service.

Issues GET requests, injects credentials and locale, and classifies failures.
It neither validates payload shape nor caches; callers do that.
"""

import logging
from typing import Any

import httpx

from movie_gateway.config import settings
from movie_gateway.errors import UpstreamMalformed, UpstreamStatusError, UpstreamUnreachable
from movie_gateway.utils import QueryParams, query_pairs

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Async JSON client for the metadata API.

    Example:
        ```python
        client = UpstreamClient.create()
        data = await client.get_json("/discover/movie", {"page": "2"})
        await client.close()
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        language: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the upstream client.

        Args:
            api_key: Credential sent as ``api_key``. Defaults to settings.
            base_url: Upstream API root. Defaults to settings.
            language: Default ``language`` parameter. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
            client: Pre-built httpx client (tests pass one with a mock transport).
        """
        self._api_key = api_key if api_key is not None else settings.tmdb_key
        self._base_url = (base_url or settings.tmdb_base_url).rstrip("/")
        self._language = language or settings.tmdb_language
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    @classmethod
    def create(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> "UpstreamClient":
        """Factory method to create UpstreamClient with defaults."""
        return cls(api_key=api_key, base_url=base_url)

    def build_params(self, params: QueryParams | None = None) -> list[tuple[str, str]]:
        """Merge caller parameters over the defaults.

        Repeated caller names are kept in order. Callers may override
        ``language``; ``api_key`` is always exactly the configured credential.
        """
        pairs = [(name, value) for name, value in query_pairs(params) if name != "api_key"]
        if not any(name == "language" for name, _ in pairs):
            pairs.insert(0, ("language", self._language))
        pairs.append(("api_key", self._api_key))
        return pairs

    async def get_json(self, path: str, params: QueryParams | None = None) -> Any:
        """GET a path below the base URL and return the parsed JSON body.

        Args:
            path: Path relative to the base URL, e.g. ``/genre/movie/list``
            params: Caller query parameters

        Returns:
            The decoded JSON body

        Raises:
            UpstreamUnreachable: On connection, timeout or other transport errors
            UpstreamStatusError: If upstream answers with a non-2xx status
            UpstreamMalformed: If the body is not valid JSON
        """
        url = f"{self._base_url}/{path.lstrip('/')}"

        try:
            response = await self.client.get(url, params=self.build_params(params))
        except httpx.TransportError as e:
            logger.error("Upstream request to %s failed: %s", path, e)
            raise UpstreamUnreachable(f"Could not reach upstream: {e}", path) from e

        if not response.is_success:
            logger.warning("Upstream %s answered %s", path, response.status_code)
            raise UpstreamStatusError(
                f"Upstream returned HTTP {response.status_code}",
                path,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Upstream %s returned a non-JSON body: %s", path, e)
            raise UpstreamMalformed(f"Upstream returned invalid JSON: {e}", path) from e

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
