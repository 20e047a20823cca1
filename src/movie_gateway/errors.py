"""Error taxonomy for the gateway.

Services raise these; handlers translate them into HTTP status codes at the
request boundary.
"""


class GatewayError(Exception):
    """Base class for all gateway errors."""


class UpstreamError(GatewayError):
    """The upstream metadata service could not produce a usable response."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class UpstreamUnreachable(UpstreamError):
    """Network or transport failure talking to the upstream service."""


class UpstreamMalformed(UpstreamError):
    """Upstream body could not be parsed as JSON."""


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-success HTTP status."""

    def __init__(self, message: str, path: str = "", status_code: int = 0) -> None:
        super().__init__(message, path)
        self.status_code = status_code


class InvalidUpstreamShape(GatewayError):
    """Upstream JSON is missing a required field or has the wrong container kind."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        super().__init__(f"Field '{field}' must be {expected}, got {actual}")
        self.field = field
        self.expected = expected
        self.actual = actual


class FavoritesStoreError(GatewayError):
    """The persisted favorites document exists but cannot be read."""
