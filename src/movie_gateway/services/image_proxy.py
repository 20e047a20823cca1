"""Stateless image proxy in front of the upstream CDN.

Inbound ``/image/<file>`` paths are rewritten to the CDN's
``/t/p/<size>/<file>`` convention and the response is streamed back
unchanged. Nothing here is cached.
"""

import logging

import httpx

from movie_gateway.config import settings
from movie_gateway.errors import UpstreamUnreachable

logger = logging.getLogger(__name__)

MOUNT_PREFIX = "/image"

# Connection-scoped headers that must not be relayed by a proxy (RFC 9110 §7.6.1)
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
    }
)


class ImageProxyService:
    """Rewrite image paths and open streaming requests to the CDN."""

    def __init__(
        self,
        base_url: str | None = None,
        size: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the image proxy.

        Args:
            base_url: CDN host. Defaults to settings.
            size: Image size tier, e.g. ``w500``. Defaults to settings.
            timeout: Request timeout in seconds. Defaults to settings.
            client: Pre-built httpx client (tests pass one with a mock transport).
        """
        self._base_url = (base_url or settings.tmdb_image_base_url).rstrip("/")
        self._size = size or settings.tmdb_image_size
        self._timeout = timeout or settings.upstream_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @classmethod
    def create(cls, base_url: str | None = None, size: str | None = None) -> "ImageProxyService":
        """Factory method to create ImageProxyService with defaults."""
        return cls(base_url=base_url, size=size)

    @property
    def path_template(self) -> str:
        return f"/t/p/{self._size}/"

    def rewrite_path(self, inbound_path: str) -> str:
        """Translate an inbound proxy path to the CDN path.

        ``/image/abc.jpg`` becomes ``/t/p/w500/abc.jpg``. A path without the
        mount prefix is treated as already relative to it.
        """
        path = inbound_path
        if path == MOUNT_PREFIX or path.startswith(MOUNT_PREFIX + "/"):
            path = path[len(MOUNT_PREFIX):]
        return self.path_template + path.lstrip("/")

    def build_url(self, inbound_path: str) -> str:
        return self._base_url + self.rewrite_path(inbound_path)

    async def open(self, inbound_path: str, query: str = "") -> httpx.Response:
        """Send the rewritten request and return the unread, streaming response.

        The caller owns the response and must close it once the body is relayed.

        Args:
            inbound_path: Path as received, including the mount prefix
            query: Raw query string to forward

        Raises:
            UpstreamUnreachable: On connection or other transport failures
        """
        url = self.build_url(inbound_path)
        if query:
            url = f"{url}?{query}"

        request = self.client.build_request("GET", url)
        try:
            return await self.client.send(request, stream=True)
        except httpx.TransportError as e:
            logger.warning("Image CDN request for %s failed: %s", inbound_path, e)
            raise UpstreamUnreachable(f"Could not reach image CDN: {e}", inbound_path) from e

    @staticmethod
    def relay_headers(response: httpx.Response) -> dict[str, str]:
        """Upstream headers minus hop-by-hop ones."""
        return {
            name: value
            for name, value in response.headers.items()
            if name.lower() not in HOP_BY_HOP_HEADERS
        }

    async def close(self) -> None:
        """Close the async HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
