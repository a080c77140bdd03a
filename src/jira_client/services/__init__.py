"""Jira REST API services (users and groups)."""

from collections.abc import Iterable, Mapping
from urllib.parse import quote_plus, urlencode

REST_API_BASE = "/rest/api/2"

QueryParams = Mapping[str, str | int | bool | Iterable[str]]


def escape(value: str) -> str:
    """Escape a value for embedding in a query string (space becomes ``+``)."""
    return quote_plus(value, safe="")


def encode_params(params: QueryParams | None) -> str:
    """Encode a parameter map as a query string, keys sorted.

    Returns an empty string for an empty or missing map.
    """
    if not params:
        return ""
    pairs: list[tuple[str, str]] = []
    for key in sorted(params):
        value = params[key]
        if isinstance(value, bool):
            pairs.append((key, "true" if value else "false"))
        elif isinstance(value, (str, int)):
            pairs.append((key, str(value)))
        else:
            pairs.extend((key, str(v)) for v in value)
    return urlencode(pairs)


def append_query(path: str, params: QueryParams | None) -> str:
    query = encode_params(params)
    return f"{path}?{query}" if query else path
