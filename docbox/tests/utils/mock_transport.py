"""
HTTP transport returning queued responses and recording requests.
"""

import json
from typing import Any

import httpx


class MockTransport(httpx.AsyncBaseTransport):
    """Mock transport for testing."""

    def __init__(self) -> None:
        self._responses: list[httpx.Response | BaseException] = []
        self._call_index = 0
        self.requests: list[httpx.Request] = []

    def add_response(
        self,
        status_code: int = httpx.codes.OK,
        json_data: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Add a response to the queue. ``json_data`` sets a JSON content type."""
        response_headers = dict(headers or {})
        if json_data is not None:
            content = json.dumps(json_data).encode()
            response_headers.setdefault("Content-Type", "application/json")
        self._responses.append(
            httpx.Response(status_code, content=content or b"", headers=response_headers)
        )

    def add_raw_response(self, response: httpx.Response) -> None:
        """Queue a prepared response, e.g. one with a streamed body."""
        self._responses.append(response)

    def add_error(self, error: BaseException) -> None:
        """Raise ``error`` instead of answering the next request."""
        self._responses.append(error)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Return next queued response."""
        await request.aread()
        self.requests.append(request)
        if self._call_index >= len(self._responses):
            return httpx.Response(
                httpx.codes.INTERNAL_SERVER_ERROR,
                json={"message": "No mock response"},
            )

        queued = self._responses[self._call_index]
        self._call_index += 1

        if isinstance(queued, BaseException):
            raise queued
        return queued
