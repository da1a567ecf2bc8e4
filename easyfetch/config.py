"""Configuration for EasyFetch."""

from dataclasses import dataclass, field

from .models import HttpMethod

DEFAULT_METHODS = tuple(m.value for m in HttpMethod)


@dataclass
class EasyFetchConfig:
    """
    Configuration for the EasyFetch client.

    Attributes:
        timeout: Request timeout in seconds (default: 5.0)
        supported_methods: HTTP methods accepted by the client
        user_agent: Value sent in the User-Agent header
        default_content_type: Content-Type used when a request does not set one

    Example:
        ```python
        config = EasyFetchConfig(timeout=10.0)
        client = EasyFetchClient(url="https://example.com", config=config)
        ```
    """

    timeout: float = 5.0
    supported_methods: tuple[str, ...] = field(default=DEFAULT_METHODS)
    user_agent: str = "EasyFetch/1.0.0"
    default_content_type: str = "application/json"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")

        if not self.supported_methods:
            raise ValueError("supported_methods must not be empty")

        self.supported_methods = tuple(m.upper() for m in self.supported_methods)
