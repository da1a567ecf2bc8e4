"""Tests for error normalization."""

import errno
import socket

import httpx
import pytest

from easyfetch import (
    ErrorResult,
    error_code_for,
    handle_connection_error,
    handle_custom_error,
    handle_transport_error,
)


def _chained(exc: httpx.HTTPError, cause: BaseException) -> httpx.HTTPError:
    exc.__cause__ = cause
    return exc


def test_custom_error_defaults():
    """Test that missing inputs fall back to defaults."""
    result = handle_custom_error()
    assert result == ErrorResult(status="error", error="Internal Server Error", status_code=500)


def test_custom_error_values():
    """Test that given inputs are kept."""
    result = handle_custom_error("Bad thing", 418, "failed")
    assert result.status == "failed"
    assert result.error == "Bad thing"
    assert result.status_code == 418


def test_error_result_serializes_status_code_key():
    """Test that the serialized form uses statusCode."""
    result = handle_custom_error("Connection refused", 400)
    assert result.to_dict() == {
        "status": "error",
        "error": "Connection refused",
        "statusCode": 400,
    }
    assert result.ok is False


@pytest.mark.parametrize(
    "code,message,status_code",
    [
        ("ECONNREFUSED", "Connection refused", 400),
        ("ENOTFOUND", "Host not found", 404),
        ("ECONNRESET", "Connection reset", 400),
        ("ECONNABORTED", "Connection aborted", 400),
        ("ETIMEDOUT", "Request timed out", 408),
    ],
)
def test_connection_error_table(code, message, status_code):
    """Test the known transport error codes."""
    result = handle_connection_error(code)
    assert result.error == message
    assert result.status_code == status_code
    assert result.status == "error"


def test_connection_error_unknown_code():
    """Test that unknown codes embed the original message."""
    result = handle_connection_error("EWEIRD", "socket exploded")
    assert result.error == "Unexpected error: socket exploded"
    assert result.status_code == 500


def test_error_code_for_timeout():
    assert error_code_for(httpx.ReadTimeout("timed out")) == "ETIMEDOUT"
    assert error_code_for(httpx.ConnectTimeout("timed out")) == "ETIMEDOUT"


def test_error_code_for_chained_os_errors():
    """Test classification through the wrapped OS error."""
    refused = _chained(
        httpx.ConnectError("connect failed"),
        OSError(errno.ECONNREFUSED, "Connection refused"),
    )
    not_found = _chained(
        httpx.ConnectError("connect failed"),
        socket.gaierror(socket.EAI_NONAME, "Name or service not known"),
    )
    reset = _chained(httpx.ReadError("read failed"), ConnectionResetError())
    aborted = _chained(httpx.WriteError("write failed"), ConnectionAbortedError())

    assert error_code_for(refused) == "ECONNREFUSED"
    assert error_code_for(not_found) == "ENOTFOUND"
    assert error_code_for(reset) == "ECONNRESET"
    assert error_code_for(aborted) == "ECONNABORTED"


def test_error_code_for_message_fallback():
    """Test classification from the error text alone."""
    exc = httpx.ConnectError("[Errno -2] Name or service not known")
    assert error_code_for(exc) == "ENOTFOUND"
    assert error_code_for(httpx.ConnectError("[Errno 111] Connection refused")) == "ECONNREFUSED"


def test_error_code_for_server_disconnect():
    exc = httpx.RemoteProtocolError("Server disconnected without sending a response.")
    assert error_code_for(exc) == "ECONNRESET"


def test_error_code_for_unknown():
    assert error_code_for(httpx.UnsupportedProtocol("Request URL has an unsupported protocol")) is None


def test_handle_transport_error_unknown():
    """Test that unrecognized errors become 500 with the original message."""
    result = handle_transport_error(httpx.ConnectError("boom"))
    assert result.status_code == 500
    assert result.error == "Unexpected error: boom"
