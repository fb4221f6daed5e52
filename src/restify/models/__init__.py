from .errors import ConfigurationError, DecodeError, RestifyError, TransportError
from .http_method import HTTPMethod
from .response import ClientResponse
from .transport import ClientCertificate, FileUpload, ProxyInfo

__all__ = [
    "ClientCertificate",
    "ClientResponse",
    "ConfigurationError",
    "DecodeError",
    "FileUpload",
    "HTTPMethod",
    "ProxyInfo",
    "RestifyError",
    "TransportError",
]
