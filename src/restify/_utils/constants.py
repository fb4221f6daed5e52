from importlib.metadata import PackageNotFoundError, version

try:
    VERSION = version("restify")
except PackageNotFoundError:
    VERSION = "0.0.0"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MULTIPART = "multipart/form-data"

DEFAULT_USER_AGENT = f"restify-python/{VERSION}"

# Timeouts, in milliseconds
DEFAULT_CONNECT_TIMEOUT = 2000
DEFAULT_READ_TIMEOUT = 2000

# Env vars
ENV_CONNECT_TIMEOUT = "RESTIFY_CONNECT_TIMEOUT"
ENV_READ_TIMEOUT = "RESTIFY_READ_TIMEOUT"
ENV_USER_AGENT = "RESTIFY_USER_AGENT"
ENV_FOLLOW_REDIRECTS = "RESTIFY_FOLLOW_REDIRECTS"
ENV_DEBUG = "RESTIFY_DEBUG"

# Status sentinel used when no HTTP status line was obtained
STATUS_UNKNOWN = -1

# Decode errors quote at most this many bytes of the response body
MAX_ERROR_BODY_BYTES = 1024
