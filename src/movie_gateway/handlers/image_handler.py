"""HTTP handler for the image proxy."""

from urllib.parse import quote

from fastapi import HTTPException, Request, status
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask

from movie_gateway.errors import UpstreamUnreachable
from movie_gateway.services import ImageProxyService


def encoded_path(request: Request) -> str:
    """Request path as the client sent it, percent-escapes intact.

    ``request.url.path`` is decoded, so an escaped ``%3F`` would turn into a
    query separator on the way to the CDN.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("latin-1")
    return quote(request.url.path)


class ImageHandler:
    """Stream CDN responses back to the caller unchanged."""

    def __init__(self, image_proxy: ImageProxyService) -> None:
        self._proxy = image_proxy

    async def proxy(self, request: Request) -> StreamingResponse:
        """Handle GET /image/{path} requests.

        Raises:
            HTTPException: 502 if the CDN cannot be reached
        """
        try:
            upstream = await self._proxy.open(encoded_path(request), request.url.query)
        except UpstreamUnreachable as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Image proxy error",
            ) from e

        return StreamingResponse(
            upstream.aiter_raw(),
            status_code=upstream.status_code,
            headers=self._proxy.relay_headers(upstream),
            background=BackgroundTask(upstream.aclose),
        )
