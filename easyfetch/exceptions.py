"""Exceptions for EasyFetch."""

from .models import ErrorResult


class EasyFetchError(Exception):
    """Base exception for all EasyFetch errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize EasyFetchError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_result(self) -> ErrorResult:
        """Convert the exception into a normalized error result."""
        return ErrorResult(error=self.message, status_code=self.status_code or 500)


class ValidationError(EasyFetchError):
    """Raised when request parameters fail validation."""

    def __init__(self, message: str = "Validation failed") -> None:
        """Initialize ValidationError."""
        super().__init__(message, status_code=400)
