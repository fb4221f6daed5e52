from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Generic, Optional, TypeVar

from httpx import Headers

from .._utils.constants import STATUS_UNKNOWN
from .http_method import HTTPMethod

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class ClientResponse(Generic[T, U]):
    """Outcome of a single REST call.

    ``status`` is ``-1`` when no HTTP status line was obtained, which
    separates transport failures from real HTTP statuses. Exactly one of
    ``success_value``, ``error_value`` and ``failure`` is populated, unless
    the matching decoder was not configured.
    """

    method: HTTPMethod = HTTPMethod.UNSET
    url: Optional[str] = None
    request: Any = None
    status: int = STATUS_UNKNOWN
    success_value: Optional[T] = None
    error_value: Optional[U] = None
    failure: Optional[Exception] = None
    headers: dict[str, list[str]] = field(default_factory=dict)
    date: Optional[datetime] = None
    last_modified: Optional[datetime] = None

    def was_successful(self) -> bool:
        return 200 <= self.status <= 299 and self.failure is None

    def set_headers(self, headers: Headers) -> None:
        for name, value in headers.multi_items():
            self.headers.setdefault(name.lower(), []).append(value)

        self.date = self._parse_date_header("date")
        self.last_modified = self._parse_date_header("last-modified")

    def _parse_date_header(self, name: str) -> Optional[datetime]:
        values = self.headers.get(name)
        if not values:
            return None

        try:
            return parsedate_to_datetime(values[0])
        except (ValueError, TypeError):
            # a malformed date from the server is not a failure of the call
            return None
