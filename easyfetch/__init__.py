"""EasyFetch - minimal async HTTP request helper.

Sends a single HTTP/HTTPS request and returns either a SuccessResult
(status, raw body, duration) or a normalized ErrorResult.

Example:
    ```python
    from easyfetch import EasyFetchClient, EasyFetchConfig, easy_fetch

    result = await easy_fetch("https://example.com/items", method="POST", body={"a": 1})
    if result.ok:
        print(result.data)
    else:
        print(result.status_code, result.error)

    # Reusable settings
    config = EasyFetchConfig(timeout=10.0)
    client = EasyFetchClient(url="https://example.com", config=config)
    result = await client.request()
    ```
"""

from .client import EasyFetchClient, format_duration, get_protocol, serialize_body
from .config import EasyFetchConfig
from .errors import (
    error_code_for,
    handle_connection_error,
    handle_custom_error,
    handle_transport_error,
)
from .exceptions import EasyFetchError, ValidationError
from .fetch import easy_fetch
from .models import ErrorResult, FetchResult, HttpMethod, RequestConfig, SuccessResult

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "EasyFetchClient",
    "easy_fetch",
    # Configuration
    "EasyFetchConfig",
    # Exceptions
    "EasyFetchError",
    "ValidationError",
    # Error normalization
    "handle_custom_error",
    "handle_connection_error",
    "handle_transport_error",
    "error_code_for",
    # Helpers
    "format_duration",
    "get_protocol",
    "serialize_body",
    # Models
    "HttpMethod",
    "RequestConfig",
    "SuccessResult",
    "ErrorResult",
    "FetchResult",
]
