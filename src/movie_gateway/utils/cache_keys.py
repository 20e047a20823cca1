"""Cache key builders for the gateway handlers."""

import json
from collections.abc import Mapping, Sequence

GENRES_KEY = "genres"

# A query as ordered (name, value) pairs; names may repeat.
QueryParams = Mapping[str, str] | Sequence[tuple[str, str]]


def query_pairs(params: QueryParams | None) -> list[tuple[str, str]]:
    """Normalize a mapping or pair sequence to a list of pairs."""
    if params is None:
        return []
    if isinstance(params, Mapping):
        return list(params.items())
    return [(name, value) for name, value in params]


def canonical_query(params: QueryParams) -> str:
    """Serialize query parameters independently of the order names arrived in.

    Pairs are sorted by name only, so repeated names keep their relative
    order. Values are kept verbatim: ``page=1`` and ``page=01`` remain
    different requests, as do ``a=1&a=2`` and ``a=2``.
    """
    pairs = sorted(query_pairs(params), key=lambda pair: pair[0])
    return json.dumps(pairs, separators=(",", ":"), ensure_ascii=False)


def genres_key() -> str:
    return GENRES_KEY


def discover_key(params: QueryParams) -> str:
    return f"discover_{canonical_query(params)}"


def movie_key(movie_id: str) -> str:
    # Language and region are not part of the key; detail requests forward no
    # client parameters, so every response for an id uses the default locale.
    return f"movie_{movie_id}"
