"""Capability interfaces the executor consumes for request and response bodies."""

from typing import Any, BinaryIO, Optional, Protocol, TypeVar, runtime_checkable

from httpx import Headers

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class BodyHandler(Protocol):
    """Produces the bytes of an HTTP request body.

    Handlers also set the headers that describe the body, such as
    Content-Type and Content-Length. Serialization happens at most once per
    handler and is cached, so ``contribute_headers`` and ``produce_body`` can
    both be called during one execution.
    """

    def contribute_headers(self, headers: Headers) -> None:
        """Set any headers describing the body that will be written.

        Args:
            headers: The outgoing request headers, modified in place.
        """
        ...

    def produce_body(self) -> Optional[bytes]:
        """Return the serialized body, or ``None`` when there is nothing to send."""
        ...

    @property
    def body_object(self) -> Any:
        """The unprocessed body (a model, a mapping, a stream, ...) or ``None``."""
        ...


@runtime_checkable
class ResponseHandler(Protocol[T_co]):
    """Turns an HTTP response body into a value of the declared type."""

    def decode(self, stream: BinaryIO) -> T_co:
        """Read the whole stream and convert it.

        Args:
            stream: The response body. An empty stream yields the handler's
                default value rather than an error.

        Returns:
            The decoded value.

        Raises:
            DecodeError: If the body is present but malformed.
        """
        ...
