"""Structural checks on upstream payloads before they are trusted or cached."""

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

from movie_gateway.dto.upstream import DiscoverPayload, GenreListPayload
from movie_gateway.errors import InvalidUpstreamShape

logger = logging.getLogger(__name__)

_EXPECTED = {
    "list_type": "a sequence",
    "model_type": "an object",
    "dict_type": "an object",
    "missing": "present",
}


class ResponseValidator:
    """Validate upstream JSON against a pydantic schema.

    Validation only confirms shape. The caller gets back the payload it
    passed in, not the model, so cached output is byte-for-byte what the
    upstream service sent.
    """

    def validate(self, payload: Any, shape: type[BaseModel]) -> Any:
        """Check payload against shape.

        Args:
            payload: Parsed upstream JSON
            shape: Schema listing the required fields

        Returns:
            The payload, unchanged

        Raises:
            InvalidUpstreamShape: Naming the first offending field
        """
        try:
            shape.model_validate(payload)
        except ValidationError as e:
            error = e.errors()[0]
            loc = error.get("loc") or ()
            field = ".".join(str(part) for part in loc) or "<body>"
            expected = _EXPECTED.get(error.get("type", ""), error.get("msg", "valid"))
            actual = "missing" if error.get("type") == "missing" else type(error.get("input")).__name__
            logger.warning("Upstream payload rejected: %s must be %s, got %s", field, expected, actual)
            raise InvalidUpstreamShape(field, expected, actual) from e
        return payload

    def genres(self, payload: Any) -> list[Any]:
        """Validate a genre list payload and narrow it to the sequence."""
        return self.validate(payload, GenreListPayload)["genres"]

    def discover(self, payload: Any) -> dict[str, Any]:
        """Validate a discover payload; the whole object is kept for pagination."""
        return self.validate(payload, DiscoverPayload)
