from ._logs import setup_logging
from ._url import join_path, normalize_query_value, serialize_query

__all__ = [
    "join_path",
    "normalize_query_value",
    "serialize_query",
    "setup_logging",
]
