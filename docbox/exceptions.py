"""
Docbox exception hierarchy.

Every failed operation raises a DocboxError with the same shape: a message,
an optional HTTP status code and an optional response body. The ``kind`` tag
tells transport failures, remote rejections and undecodable responses apart.
"""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Category of a failed call."""

    TRANSPORT = "transport"
    REMOTE = "remote"
    DECODE = "decode"


class DocboxError(Exception):
    """Base exception for all docbox errors."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        response_body: Any = None,
        **context: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        self.context = context

    def __str__(self) -> str:
        ctx = {k: v for k, v in self.context.items() if v is not None}
        if self.status_code is not None:
            ctx = {"status_code": self.status_code, **ctx}
        if ctx:
            rendered = ", ".join(f"{k}={v!r}" for k, v in ctx.items())
            return f"{self.message} ({rendered})"
        return self.message

    @property
    def is_remote(self) -> bool:
        """True if the archive API answered with an error status."""
        return self.status_code is not None

    @property
    def is_transport(self) -> bool:
        """True if the archive API could not be reached."""
        return self.kind is ErrorKind.TRANSPORT


class NetworkError(DocboxError):
    """Network-level error (DNS, connection refused, TLS)."""

    kind = ErrorKind.TRANSPORT


class DocboxTimeoutError(NetworkError):
    """The request did not complete within the configured timeout."""


class APIError(DocboxError):
    """The archive API rejected the request with a non-2xx status."""

    kind = ErrorKind.REMOTE

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response_body: Any = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(
            message, status_code=status_code, response_body=response_body, endpoint=endpoint
        )
        self.endpoint = endpoint


class AuthenticationError(APIError):
    """API key, cloud id or basic auth credentials were rejected (401/403)."""


class NotFoundError(APIError):
    """Resource not found (folder, document, inbox)."""

    def __init__(
        self, message: str, *, response_body: Any = None, endpoint: str | None = None
    ) -> None:
        super().__init__(message, status_code=404, response_body=response_body, endpoint=endpoint)


class RateLimitError(APIError):
    """Rate limited by the archive API."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: int | None = None,
        response_body: Any = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(message, status_code=429, response_body=response_body, endpoint=endpoint)
        self.retry_after = retry_after


class ServerError(APIError):
    """Server-side error (5xx)."""


class ResponseDecodeError(DocboxError):
    """A successful response could not be decoded into the expected result."""

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        response_body: Any = None,
        endpoint: str | None = None,
    ) -> None:
        super().__init__(
            message, response_body=response_body, http_status=http_status, endpoint=endpoint
        )
        self.http_status = http_status
        self.endpoint = endpoint
