from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP methods a request can be sent with. ``UNSET`` is never sent."""

    UNSET = "UNSET"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
