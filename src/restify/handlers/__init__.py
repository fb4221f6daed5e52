from ._protocols import BodyHandler, ResponseHandler
from .body import (
    ByteArrayBodyHandler,
    FormDataBodyHandler,
    JSONBodyHandler,
    MultipartBodyHandler,
    Multiparts,
    StreamBodyHandler,
)
from .response import (
    ByteArrayResponseHandler,
    JSONResponseHandler,
    TextResponseHandler,
)

__all__ = [
    "BodyHandler",
    "ByteArrayBodyHandler",
    "ByteArrayResponseHandler",
    "FormDataBodyHandler",
    "JSONBodyHandler",
    "JSONResponseHandler",
    "MultipartBodyHandler",
    "Multiparts",
    "ResponseHandler",
    "StreamBodyHandler",
    "TextResponseHandler",
]
