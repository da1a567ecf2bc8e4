"""Normalization of failure signals into ErrorResult."""

import errno
import socket
from collections.abc import Iterator

import httpx

from .models import ErrorResult

# code -> (message, status code)
CONNECTION_ERRORS: dict[str, tuple[str, int]] = {
    "ECONNREFUSED": ("Connection refused", 400),
    "ENOTFOUND": ("Host not found", 404),
    "ECONNRESET": ("Connection reset", 400),
    "ECONNABORTED": ("Connection aborted", 400),
    "ETIMEDOUT": ("Request timed out", 408),
}

_ERRNO_CODES = {
    errno.ECONNREFUSED: "ECONNREFUSED",
    errno.ECONNRESET: "ECONNRESET",
    errno.ECONNABORTED: "ECONNABORTED",
    errno.ETIMEDOUT: "ETIMEDOUT",
}

_OS_ERROR_TYPES = (
    (ConnectionRefusedError, "ECONNREFUSED"),
    (ConnectionResetError, "ECONNRESET"),
    (ConnectionAbortedError, "ECONNABORTED"),
    (TimeoutError, "ETIMEDOUT"),
)

# Resolver and socket messages differ per platform.
_MESSAGE_CODES = (
    ("name or service not known", "ENOTFOUND"),
    ("nodename nor servname", "ENOTFOUND"),
    ("temporary failure in name resolution", "ENOTFOUND"),
    ("no address associated with hostname", "ENOTFOUND"),
    ("getaddrinfo failed", "ENOTFOUND"),
    ("connection refused", "ECONNREFUSED"),
    ("connection reset", "ECONNRESET"),
    ("connection aborted", "ECONNABORTED"),
)


def handle_custom_error(
    message: str | None = None,
    status_code: int | None = None,
    status: str | None = None,
) -> ErrorResult:
    """
    Build a normalized error result.

    Args:
        message: Error message (default: "Internal Server Error")
        status_code: HTTP-like status code (default: 500)
        status: Status label (default: "error")

    Returns:
        ErrorResult with the defaults applied to any missing input
    """
    return ErrorResult(
        status=status or "error",
        error=message or "Internal Server Error",
        status_code=status_code or 500,
    )


def handle_connection_error(code: str | None, message: str | None = None) -> ErrorResult:
    """
    Map a transport error code to a normalized error result.

    Args:
        code: One of ECONNREFUSED, ENOTFOUND, ECONNRESET, ECONNABORTED, ETIMEDOUT
        message: Original error message, used for unrecognized codes

    Returns:
        ErrorResult for the code, or a 500 embedding the original message
    """
    if code in CONNECTION_ERRORS:
        text, status_code = CONNECTION_ERRORS[code]
        return handle_custom_error(text, status_code, "error")
    return handle_custom_error(
        f"Unexpected error: {message or code or 'unknown'}", 500, "error"
    )


def _exception_chain(exc: BaseException) -> Iterator[BaseException]:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def error_code_for(exc: BaseException) -> str | None:
    """
    Classify a transport exception into a connection error code.

    httpx wraps the underlying OS error, so the exception chain is searched
    before falling back to the error messages.

    Args:
        exc: Exception raised while sending the request or reading the response

    Returns:
        The matching code, or None if the error is not recognized
    """
    if isinstance(exc, httpx.TimeoutException):
        return "ETIMEDOUT"

    for err in _exception_chain(exc):
        if isinstance(err, socket.gaierror):
            return "ENOTFOUND"
        for exc_type, code in _OS_ERROR_TYPES:
            if isinstance(err, exc_type):
                return code
        if isinstance(err, OSError) and err.errno in _ERRNO_CODES:
            return _ERRNO_CODES[err.errno]

    for err in _exception_chain(exc):
        text = str(err).lower()
        for needle, code in _MESSAGE_CODES:
            if needle in text:
                return code

    if isinstance(exc, httpx.RemoteProtocolError):
        return "ECONNRESET"

    return None


def handle_transport_error(exc: BaseException) -> ErrorResult:
    """Normalize an exception raised by the transport."""
    return handle_connection_error(error_code_for(exc), str(exc) or type(exc).__name__)
