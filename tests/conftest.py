"""Pytest configuration for EasyFetch tests."""

import httpx
import pytest


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def recorded_requests():
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_transport(recorded_requests):
    """Build a MockTransport that records requests and replies with a fixed response."""

    def factory(status_code=200, content=b"", raises=None):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if raises is not None:
                raise raises
            return httpx.Response(status_code, content=content)

        return httpx.MockTransport(handler)

    return factory
