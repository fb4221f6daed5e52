"""URL assembly: path joining, query value normalization and serialization."""

from collections.abc import Collection, Iterator, Mapping
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any
from urllib.parse import quote_plus

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def join_path(base: str, fragment: str) -> str:
    """Append a path fragment to a URL with exactly one ``/`` between them.

    Args:
        base: The URL built so far. When empty, the fragment becomes the URL.
        fragment: The path segment or path to append.

    Returns:
        The joined URL.
    """
    if not base:
        return fragment
    if not fragment:
        return base

    if base.endswith("/") and fragment.startswith("/"):
        return base + fragment[1:]
    if not base.endswith("/") and not fragment.startswith("/"):
        return f"{base}/{fragment}"
    return base + fragment


def _is_collection(value: Any) -> bool:
    # value objects such as pydantic models iterate but are sent whole
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, (Collection, Iterator))


def _normalize_scalar(value: Any) -> str:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str((value - _EPOCH) // timedelta(milliseconds=1))
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def normalize_query_value(value: Any) -> list[str]:
    """Convert a query parameter value into its URL string entries.

    Datetimes become UTC epoch milliseconds, collections contribute one entry
    per element, booleans are lower case and anything else uses ``str``.
    """
    if isinstance(value, datetime):
        return [_normalize_scalar(value)]
    if _is_collection(value):
        return [_normalize_scalar(item) for item in value]
    return [_normalize_scalar(value)]


def serialize_query(url: str, parameters: Mapping[str, list[str]]) -> str:
    """Append the encoded query string to ``url``.

    Keys and values are UTF-8 percent-encoded (spaces as ``+``). An existing
    ``?`` in the URL is extended rather than duplicated.
    """
    pairs = [
        f"{quote_plus(name)}={quote_plus(value)}"
        for name, values in parameters.items()
        for value in values
    ]
    if not pairs:
        return url

    if "?" not in url:
        url += "?"
    elif not url.endswith(("?", "&")):
        url += "&"

    return url + "&".join(pairs)
