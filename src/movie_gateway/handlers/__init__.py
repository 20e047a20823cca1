"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .favorites_handler import FavoritesHandler
from .gateway_handler import GatewayHandler
from .image_handler import ImageHandler

__all__ = [
    "FavoritesHandler",
    "GatewayHandler",
    "ImageHandler",
]
