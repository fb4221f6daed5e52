"""Typed REST call builder and executor built on httpx."""

from ._config import Config
from ._executor import Executor, execute
from ._utils._logs import setup_logging
from ._utils._request_spec import RequestSpec
from ._utils.constants import VERSION as __version__
from .handlers import (
    BodyHandler,
    ByteArrayBodyHandler,
    ByteArrayResponseHandler,
    FormDataBodyHandler,
    JSONBodyHandler,
    JSONResponseHandler,
    MultipartBodyHandler,
    Multiparts,
    ResponseHandler,
    StreamBodyHandler,
    TextResponseHandler,
)
from .models import (
    ClientCertificate,
    ClientResponse,
    ConfigurationError,
    DecodeError,
    FileUpload,
    HTTPMethod,
    ProxyInfo,
    RestifyError,
    TransportError,
)

__all__ = [
    "__version__",
    "BodyHandler",
    "ByteArrayBodyHandler",
    "ByteArrayResponseHandler",
    "ClientCertificate",
    "ClientResponse",
    "Config",
    "ConfigurationError",
    "DecodeError",
    "Executor",
    "FileUpload",
    "FormDataBodyHandler",
    "HTTPMethod",
    "JSONBodyHandler",
    "JSONResponseHandler",
    "MultipartBodyHandler",
    "Multiparts",
    "ProxyInfo",
    "RequestSpec",
    "ResponseHandler",
    "RestifyError",
    "StreamBodyHandler",
    "TextResponseHandler",
    "TransportError",
    "execute",
    "setup_logging",
]
