"""Data models for EasyFetch."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP methods supported by default."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


@dataclass
class RequestConfig:
    """
    Parameters of a single request.

    Values are kept as given so that validation can report a wrong type
    instead of silently converting it.
    """

    url: Any = ""
    method: Any = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: str | bytes | dict | list | None = None
    content_type: str | None = None


class SuccessResult(BaseModel):
    """Result of a request that completed with a 2xx status."""

    status: int = Field(..., ge=200, lt=300, description="HTTP status code")
    data: str = Field(..., description="Raw response body")
    time: str = Field(..., description="Formatted request duration")

    @property
    def ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


class ErrorResult(BaseModel):
    """Normalized error produced by any failed request."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(default="error", description="Status label")
    error: str = Field(default="Internal Server Error", description="Error message")
    status_code: int = Field(
        default=500, alias="statusCode", description="HTTP-like status code"
    )

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camel-case ``statusCode`` key."""
        return self.model_dump(by_alias=True)


FetchResult = Union[SuccessResult, ErrorResult]
