from typing import Optional

from .._utils.constants import MAX_ERROR_BODY_BYTES


class RestifyError(Exception):
    """Base class for every error produced by restify."""

    def __init__(self, message: str = "", cause: Optional[BaseException] = None):
        self.message = message
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(RestifyError):
    """Raised when a request is not valid to attempt.

    These are caller bugs (no URL, no HTTP method, a declared response type
    without a decoder) and are reported before any network activity.
    """


class TransportError(RestifyError):
    """The request could not be sent or the response could not be read.

    Never raised by the executor. It is stored on ``ClientResponse.failure``.
    """

    @staticmethod
    def create(url: Optional[str], cause: BaseException) -> "TransportError":
        message = f"Error calling REST WebService at [{url}]: {cause}"
        return TransportError(message, cause)


class DecodeError(RestifyError):
    """A response body was received but could not be decoded."""

    @staticmethod
    def from_body(
        body: bytes, cause: Optional[BaseException] = None
    ) -> "DecodeError":
        """Create a DecodeError quoting the offending response body.

        Args:
            body: The raw response body.
            cause: The underlying parser error, if any.

        Returns:
            DecodeError whose message holds the body, truncated to the first
            ``MAX_ERROR_BODY_BYTES`` bytes.
        """
        message = "Failed to parse the HTTP response as JSON. Actual HTTP response body:\n"
        if len(body) > MAX_ERROR_BODY_BYTES:
            message += (
                f"Note: Output has been truncated to the first "
                f"{MAX_ERROR_BODY_BYTES} of {len(body)} bytes.\n\n"
            )
            body = body[:MAX_ERROR_BODY_BYTES]
        message += body.decode("utf-8", errors="replace")
        return DecodeError(message, cause)
