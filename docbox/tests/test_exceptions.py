from docbox.exceptions import (
    APIError,
    DocboxError,
    DocboxTimeoutError,
    ErrorKind,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
)


def test_docbox_error_str_without_context() -> None:
    error = DocboxError("Something failed")

    assert str(error) == "Something failed"


def test_docbox_error_str_with_context() -> None:
    error = DocboxError("Failed", endpoint="/inboxes", attempt=1)

    assert "Failed" in str(error)
    assert "endpoint='/inboxes'" in str(error)
    assert "attempt=1" in str(error)


def test_api_error_str_includes_status_code() -> None:
    error = APIError("API request failed: Bad Request", status_code=400)

    assert "status_code=400" in str(error)


def test_not_found_error_has_status_404() -> None:
    error = NotFoundError("Folder not found")

    assert error.status_code == 404
    assert error.is_remote
    assert error.kind is ErrorKind.REMOTE


def test_rate_limit_error_has_status_429() -> None:
    error = RateLimitError(retry_after=10)

    assert error.status_code == 429
    assert error.retry_after == 10


def test_network_error_has_no_status_code() -> None:
    error = NetworkError("Network error: connection refused")

    assert error.status_code is None
    assert not error.is_remote
    assert error.is_transport


def test_timeout_error_is_network_error() -> None:
    error = DocboxTimeoutError("Request timed out")

    assert isinstance(error, NetworkError)
    assert error.kind is ErrorKind.TRANSPORT


def test_decode_error_is_neither_remote_nor_transport() -> None:
    error = ResponseDecodeError("Invalid JSON", http_status=200, response_body="{")

    assert error.kind is ErrorKind.DECODE
    assert error.status_code is None
    assert error.http_status == 200
    assert not error.is_remote
    assert not error.is_transport
