import json
import os
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Mapping, Optional, Sequence, Union

from httpx import Headers, Request
from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from .._utils.constants import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
)
from ..models.transport import FileUpload
from ._protocols import BodyHandler

FormValue = Union[str, Sequence[str]]


def _encode_form(headers: Optional[dict[str, str]] = None, **kwargs: Any) -> bytes:
    """Encode ``data=``/``files=`` the way httpx sends them."""
    return Request("POST", "http://localhost", headers=headers, **kwargs).read()


class _SerializingBodyHandler(BodyHandler, ABC):
    """Serializes ``body_object`` once and caches the bytes."""

    def __init__(self, request: Any) -> None:
        self.request = request
        self._body: Optional[bytes] = None

    @property
    def body_object(self) -> Any:
        return self.request

    def produce_body(self) -> Optional[bytes]:
        if self.request is not None and self._body is None:
            self._body = self._serialize()
        return self._body

    def contribute_headers(self, headers: Headers) -> None:
        body = self.produce_body()
        if body is None:
            return
        headers[HEADER_CONTENT_TYPE] = self.content_type
        headers[HEADER_CONTENT_LENGTH] = str(len(body))

    @property
    @abstractmethod
    def content_type(self) -> str: ...

    @abstractmethod
    def _serialize(self) -> bytes: ...


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_drop_none(v) for v in value]
    return value


class JSONBodyHandler(_SerializingBodyHandler):
    """Sends the request object as compact JSON.

    Pydantic models are dumped by alias. Any other object goes through
    ``pydantic_core.to_jsonable_python``, so dataclasses, datetimes and UUIDs
    are handled too. The serializer options belong to the handler instance.
    """

    def __init__(
        self,
        request: Any,
        *,
        exclude_none: bool = True,
        sort_keys: bool = True,
    ) -> None:
        super().__init__(request)
        self.exclude_none = exclude_none
        self.sort_keys = sort_keys

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_JSON

    def _serialize(self) -> bytes:
        if isinstance(self.request, BaseModel):
            data = self.request.model_dump(
                mode="json", by_alias=True, exclude_none=self.exclude_none
            )
        else:
            data = to_jsonable_python(self.request)

        if self.exclude_none:
            data = _drop_none(data)

        return json.dumps(
            data,
            sort_keys=self.sort_keys,
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")


class FormDataBodyHandler(_SerializingBodyHandler):
    """Sends a mapping as ``application/x-www-form-urlencoded``.

    A value may be a string or a sequence of strings; sequences produce one
    pair per element.
    """

    def __init__(self, request: Optional[Mapping[str, FormValue]]) -> None:
        super().__init__(request)

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_FORM

    def _serialize(self) -> bytes:
        return _encode_form(data=self.request)


class ByteArrayBodyHandler(BodyHandler):
    def __init__(self, body: Optional[bytes]) -> None:
        self.body = body

    @property
    def body_object(self) -> Any:
        return None

    def produce_body(self) -> Optional[bytes]:
        return self.body

    def contribute_headers(self, headers: Headers) -> None:
        if self.body is not None:
            headers[HEADER_CONTENT_LENGTH] = str(len(self.body))


class StreamBodyHandler(BodyHandler):
    """Sends the contents of a binary file object.

    The stream is read once, on first use.
    """

    def __init__(
        self,
        content_type: Optional[str],
        request: Optional[BinaryIO],
        length: Optional[int] = None,
    ) -> None:
        self.content_type = content_type
        self.request = request
        self.length = length
        self._body: Optional[bytes] = None

    @property
    def body_object(self) -> Any:
        return self.request

    def produce_body(self) -> Optional[bytes]:
        if self.request is not None and self._body is None:
            self._body = self.request.read()
        return self._body

    def contribute_headers(self, headers: Headers) -> None:
        if self.content_type is not None:
            headers[HEADER_CONTENT_TYPE] = self.content_type

        if self.length is not None:
            headers[HEADER_CONTENT_LENGTH] = str(self.length)


class Multiparts(BaseModel):
    files: Optional[list[FileUpload]] = None
    parameters: Optional[dict[str, list[str]]] = None


class MultipartBodyHandler(_SerializingBodyHandler):
    """Sends files and parameters as ``multipart/form-data``.

    Files are written first, then every value of every parameter. Parts are
    encoded by httpx, which also escapes names and file names.
    """

    def __init__(self, request: Optional[Multiparts]) -> None:
        super().__init__(request)
        self.boundary = os.urandom(16).hex()

    @property
    def content_type(self) -> str:
        return f"{CONTENT_TYPE_MULTIPART}; boundary={self.boundary}"

    def produce_body(self) -> Optional[bytes]:
        if self.request is None or not (
            self.request.files or any((self.request.parameters or {}).values())
        ):
            return None
        return super().produce_body()

    def _serialize(self) -> bytes:
        parts: list[tuple[str, Any]] = [
            (
                upload.name,
                (upload.file_name, upload.file.read_bytes(), upload.content_type),
            )
            for upload in self.request.files or []
        ]
        # a part without a file name is rendered as a plain form field
        parts.extend(
            (name, (None, value.encode("utf-8")))
            for name, values in (self.request.parameters or {}).items()
            for value in values
        )
        return _encode_form(
            headers={HEADER_CONTENT_TYPE: self.content_type}, files=parts
        )
