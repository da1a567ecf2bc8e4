"""EasyFetch request executor."""

import json
import time
from typing import Any

import httpx
import structlog

from .config import EasyFetchConfig
from .errors import handle_connection_error, handle_custom_error, handle_transport_error
from .exceptions import ValidationError
from .models import FetchResult, RequestConfig, SuccessResult

logger = structlog.get_logger()


def format_duration(duration_ms: float) -> str:
    """Format milliseconds as "999ms" below one second, "2.50s" above."""
    if duration_ms < 1000:
        return f"{int(duration_ms)}ms"
    return f"{duration_ms / 1000:.2f}s"


def get_protocol(url: Any) -> str:
    """Return "https" for https URLs and "http" for anything else."""
    try:
        scheme = httpx.URL(url).scheme
    except (httpx.InvalidURL, TypeError):
        return "http"
    return "https" if scheme == "https" else "http"


def serialize_body(body: Any) -> str | bytes | None:
    """Serialize dict and list bodies to compact JSON text."""
    if isinstance(body, (dict, list)):
        return json.dumps(body, separators=(",", ":"))
    return body


_DEFAULT_PORTS = {"http": 80, "https": 443}


def _get_host(url: str) -> str:
    """Return the URL authority as host[:port], omitting the scheme default port."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return ""

    host = parsed.raw_host.decode("ascii")
    if not host:
        return ""
    if ":" in host:
        host = f"[{host}]"
    port = parsed.port
    if port is not None and port != _DEFAULT_PORTS.get(parsed.scheme):
        host = f"{host}:{port}"
    return host


class EasyFetchClient:
    """
    Executes a single HTTP request and normalizes its outcome.

    Parameters are validated on construction; invalid parameters raise
    ValidationError. Once constructed, ``request()`` always returns a
    SuccessResult or an ErrorResult and never raises for network or HTTP
    failures.

    Example:
        ```python
        client = EasyFetchClient(url="https://example.com/items", method="POST", body='{"a":1}')
        result = await client.request()
        if result.ok:
            print(result.status, result.time)
        ```
    """

    def __init__(
        self,
        request: RequestConfig | None = None,
        *,
        config: EasyFetchConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **params: Any,
    ) -> None:
        """
        Initialize the client.

        Args:
            request: Request parameters. If None, built from ``params``.
            config: Client configuration. If None, uses default config.
            transport: Optional httpx transport, mainly for tests.
            **params: Fields of RequestConfig (url, method, headers, body, content_type)

        Raises:
            ValidationError: If the URL, method or a header value is invalid
            TypeError: If both ``request`` and ``params`` are given
        """
        if request is not None and params:
            raise TypeError("Pass either a RequestConfig or keyword parameters, not both")
        request = request or RequestConfig(**params)
        self.config = config or EasyFetchConfig()
        self.validate_params(request.url, request.method)

        self.url: str = request.url
        self.method: str = request.method.upper()
        self.body = serialize_body(request.body)
        self.content_type = request.content_type or self.config.default_content_type
        self.protocol = get_protocol(self.url)
        self.headers = self._build_headers(request.headers)
        self._transport = transport
        logger.debug(
            "EasyFetchClient initialized",
            method=self.method,
            url=self.url,
            protocol=self.protocol,
        )

    def validate_params(self, url: Any, method: Any) -> None:
        """
        Validate the URL and method.

        Raises:
            ValidationError: On the first failing check
        """
        if not isinstance(url, str):
            raise ValidationError("URL must be a string")
        if not url:
            raise ValidationError("URL is required")
        if not isinstance(method, str):
            raise ValidationError("Method must be a string")
        if method not in self.config.supported_methods:
            supported = ", ".join(self.config.supported_methods)
            raise ValidationError(f"Unsupported method. Supported methods are: {supported}")

    def _build_headers(self, headers: dict[str, str] | None) -> httpx.Headers:
        resolved = httpx.Headers(
            {
                "User-Agent": self.config.user_agent,
                "Accept": "*/*",
            }
        )
        host = _get_host(self.url)
        if host:
            resolved["Host"] = host
        resolved["Content-Type"] = self.content_type
        # Case-insensitive replace, so caller values win.
        for key, value in (headers or {}).items():
            try:
                resolved.update({key: value})
            except (UnicodeEncodeError, TypeError) as e:
                raise ValidationError(f"Invalid header value for {key!r}") from e
        return resolved

    async def request(self) -> FetchResult:
        """
        Send the request.

        Returns:
            SuccessResult for 2xx responses, ErrorResult otherwise
        """
        logger.debug(
            "Sending request",
            method=self.method,
            url=self.url,
            protocol=self.protocol,
        )
        start = time.perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                async with client.stream(
                    self.method,
                    self.url,
                    headers=self.headers,
                    content=self.body,
                ) as response:
                    chunks = [chunk async for chunk in response.aiter_text()]
                    status = response.status_code
        except httpx.TimeoutException:
            logger.warning("Request timed out", url=self.url, timeout=self.config.timeout)
            return handle_connection_error("ETIMEDOUT")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request failed", url=self.url, error=str(e))
            return handle_transport_error(e)

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info("Request completed", url=self.url, status=status, duration_ms=round(duration_ms))
        return self.handle_response(status, "".join(chunks), duration_ms)

    def handle_response(self, status: int, data: str, duration_ms: float) -> FetchResult:
        """Classify a completed response by status code."""
        if 200 <= status < 300:
            return SuccessResult(status=status, data=data, time=format_duration(duration_ms))
        return handle_custom_error(f"HTTP Error: {status} - {data}", status, "error")
