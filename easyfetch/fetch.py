"""Convenience entry point for one-off requests."""

from typing import Any

import httpx
import structlog

from .client import EasyFetchClient, serialize_body
from .config import EasyFetchConfig
from .exceptions import EasyFetchError
from .models import FetchResult, RequestConfig

logger = structlog.get_logger()


async def easy_fetch(
    url: Any = "",
    method: Any = "GET",
    headers: dict[str, str] | None = None,
    body: Any = None,
    content_type: str = "application/json",
    config: EasyFetchConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FetchResult:
    """
    Send a single request and return its normalized result.

    Dict and list bodies are serialized to JSON before sending. Validation
    errors are returned as an ErrorResult instead of being raised.

    Example:
        ```python
        result = await easy_fetch("http://example.test/x", method="POST", body={"a": 1})
        print(result.to_dict())
        ```
    """
    request = RequestConfig(
        url=url,
        method=method,
        headers=headers or {},
        body=serialize_body(body),
        content_type=content_type,
    )

    try:
        client = EasyFetchClient(request, config=config, transport=transport)
    except EasyFetchError as e:
        logger.warning("Invalid request", error=e.message, status_code=e.status_code)
        return e.to_result()

    result = await client.request()
    if result.ok:
        logger.info("Response data", **result.to_dict())
    else:
        logger.warning("Request error", method=client.method, url=client.url, **result.to_dict())
    return result
