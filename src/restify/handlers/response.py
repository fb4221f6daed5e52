from typing import Any, BinaryIO, Generic, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import DecodeError
from ._protocols import ResponseHandler

T = TypeVar("T")


class JSONResponseHandler(ResponseHandler[Optional[T]], Generic[T]):
    """Reads the body as JSON and validates it against ``response_type``.

    ``response_type`` is anything pydantic can build a ``TypeAdapter`` for: a
    model, a dataclass, ``dict``, ``list[int]`` and so on. An empty body
    decodes to ``None``.
    """

    def __init__(self, response_type: Any) -> None:
        self.response_type = response_type
        self._adapter: TypeAdapter[T] = TypeAdapter(response_type)

    def decode(self, stream: Optional[BinaryIO]) -> Optional[T]:
        if stream is None:
            return None

        body = stream.read()
        if not body:
            return None

        try:
            return self._adapter.validate_json(body)
        except ValidationError as e:
            raise DecodeError.from_body(body, e) from e


class TextResponseHandler(ResponseHandler[str]):
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def decode(self, stream: Optional[BinaryIO]) -> str:
        if stream is None:
            return ""
        return stream.read().decode(self.encoding)


class ByteArrayResponseHandler(ResponseHandler[bytes]):
    def decode(self, stream: Optional[BinaryIO]) -> bytes:
        if stream is None:
            return b""
        return stream.read()
