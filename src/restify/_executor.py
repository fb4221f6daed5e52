import io
from logging import getLogger
from typing import Any, Optional

from httpx import BaseTransport, Client, Headers, Response

from ._config import Config
from ._utils._request_spec import RequestSpec
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import HEADER_USER_AGENT, STATUS_UNKNOWN
from .handlers._protocols import ResponseHandler
from .models.errors import ConfigurationError, DecodeError, TransportError
from .models.http_method import HTTPMethod
from .models.response import ClientResponse


def is_success_status(status: int) -> bool:
    return 200 <= status <= 299


class Executor:
    """Sends a ``RequestSpec`` and captures the outcome in a ``ClientResponse``.

    Only configuration errors are raised. Transport and decode failures are
    stored on ``ClientResponse.failure`` with ``status`` left at ``-1`` when
    no status line was obtained.

    A new ``httpx.Client`` is built per execution, so an executor can be
    shared between threads.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[BaseTransport] = None,
    ) -> None:
        self._logger = getLogger("restify")
        self._config = config or Config()
        self._transport = transport

    def validate(self, spec: RequestSpec) -> None:
        if not spec.url:
            raise ConfigurationError("You must specify a URL")

        if spec.method is None or spec.method == HTTPMethod.UNSET:
            raise ConfigurationError("You must specify a HTTP method")

        try:
            HTTPMethod(spec.method)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported HTTP method [{spec.method}]") from e

        if spec.success_type is not None and spec.success_decoder is None:
            raise ConfigurationError(
                "You specified a success response type, you must then provide a success response handler."
            )

        if spec.error_type is not None and spec.error_decoder is None:
            raise ConfigurationError(
                "You specified an error response type, you must then provide an error response handler."
            )

    def execute(self, spec: RequestSpec) -> ClientResponse[Any, Any]:
        self.validate(spec)

        method = HTTPMethod(spec.method)
        response: ClientResponse[Any, Any] = ClientResponse(method=method)
        producer = spec.body_producer
        client: Optional[Client] = None

        try:
            response.request = producer.body_object if producer is not None else None
            response.url = spec.build_url()

            headers = Headers(spec.headers)
            if HEADER_USER_AGENT not in headers:
                headers[HEADER_USER_AGENT] = spec.user_agent or self._config.user_agent

            content = None
            if producer is not None:
                producer.contribute_headers(headers)
                content = producer.produce_body()

            client = Client(**self._client_kwargs(spec))
            request = client.build_request(
                method.value, response.url, headers=headers, content=content
            )
        except Exception as e:
            if client is not None:
                client.close()
            return self._fail(response, e)

        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {dict(request.headers)}")

        with client:
            try:
                http_response = client.send(request, stream=True)
            except Exception as e:
                return self._fail(response, e)

            try:
                response.status = http_response.status_code
                response.set_headers(http_response.headers)
                self._decode(spec, response, http_response)
            finally:
                http_response.close()

        return response

    def _decode(
        self,
        spec: RequestSpec,
        response: ClientResponse[Any, Any],
        http_response: Response,
    ) -> None:
        success = is_success_status(response.status)
        decoder: Optional[ResponseHandler[Any]] = (
            spec.success_decoder if success else spec.error_decoder
        )
        if decoder is None or (success and spec.method == HTTPMethod.HEAD):
            return

        try:
            body = http_response.read()
        except Exception as e:
            self._fail(response, e, keep_status=True)
            return

        try:
            value = decoder.decode(io.BytesIO(body))
        except Exception as e:
            self._logger.debug(
                f"Error decoding the response from [{response.url}]", exc_info=True
            )
            response.failure = (
                e if isinstance(e, DecodeError) else DecodeError(str(e), e)
            )
            return

        if success:
            response.success_value = value
        else:
            response.error_value = value

    def _fail(
        self,
        response: ClientResponse[Any, Any],
        error: Exception,
        keep_status: bool = False,
    ) -> ClientResponse[Any, Any]:
        self._logger.debug(
            f"Error calling REST WebService at [{response.url}]", exc_info=True
        )
        if not keep_status:
            response.status = STATUS_UNKNOWN
        response.failure = (
            error
            if isinstance(error, TransportError)
            else TransportError.create(response.url, error)
        )
        return response

    def _client_kwargs(self, spec: RequestSpec) -> dict[str, Any]:
        kwargs = get_httpx_client_kwargs(
            connect_timeout=(
                self._config.connect_timeout if spec.timeout is None else spec.timeout
            ),
            read_timeout=(
                self._config.read_timeout
                if spec.read_write_timeout is None
                else spec.read_write_timeout
            ),
            follow_redirects=(
                self._config.follow_redirects
                if spec.follow_redirects is None
                else spec.follow_redirects
            ),
            proxy=spec.proxy,
            client_certificate=spec.client_certificate,
            sni_verification_disabled=spec.sni_verification_disabled,
        )
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs


def execute(
    spec: RequestSpec, config: Optional[Config] = None
) -> ClientResponse[Any, Any]:
    """Run ``spec`` on a new ``Executor``."""
    return Executor(config).execute(spec)
