"""
Async HTTP client for the Docbox archive API.

Every endpoint call goes through AsyncHttpClient.request, the only place where
authentication headers are applied and HTTP outcomes are turned into decoded
payloads or DocboxError exceptions. Requests are sent exactly once.
"""

import asyncio
import base64
import json
from collections.abc import Awaitable, Callable, Mapping, Sequence
from datetime import date, datetime
from typing import Any, Self

import httpx
import structlog

from docbox.config import DocboxConfig
from docbox.exceptions import (
    APIError,
    AuthenticationError,
    DocboxTimeoutError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
)

logger = structlog.get_logger(__name__)

EventHook = Callable[..., Awaitable[None]]

SENSITIVE_HEADERS = frozenset({"api-key", "authorization", "cloud-id", "proxy-authorization"})

_MESSAGE_KEYS = ("message", "error", "detail", "Message", "Error", "Detail")
_MAX_TEXT_MESSAGE = 200


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """
    Mask credential headers before logging.

    Args:
        headers: Request headers.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    return {k: "***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def format_query_value(value: Any) -> str:
    """
    Serialize one query parameter or form field value.

    Booleans become ``true``/``false``, dates and datetimes their calendar date
    (``YYYY-MM-DD``), mappings a compact JSON string and other sequences a
    comma separated list.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return json.dumps(dict(value), separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, Sequence):
        return ",".join(format_query_value(item) for item in value)
    return str(value)


def encode_query(params: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Serialize query parameters, dropping ``None`` values and keeping order."""
    return [(key, format_query_value(value)) for key, value in params.items() if value is not None]


def build_query(table: Mapping[str, str], **values: Any) -> dict[str, Any]:
    """
    Rename options to their wire keys.

    Args:
        table: Option name to query key mapping.
        **values: Option values; ``None`` means not set.

    Returns:
        Wire key to value mapping, in table order, without unset options.
    """
    unknown = values.keys() - table.keys()
    if unknown:
        msg = f"unknown query options: {', '.join(sorted(unknown))}"
        raise TypeError(msg)
    return {wire: values[name] for name, wire in table.items() if values.get(name) is not None}


def build_headers(config: DocboxConfig) -> dict[str, str]:
    """Authentication and content negotiation headers for every request."""
    headers = {"API-Key": config.api_key}
    if config.cloud_id:
        headers["Cloud-ID"] = config.cloud_id
    if config.has_basic_auth:
        token = base64.b64encode(f"{config.username}:{config.password}".encode()).decode("ascii")
        headers["Authorization"] = f"Basic {token}"
    headers["Accept"] = "application/json"
    return headers


def client_options(
    config: DocboxConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    event_hooks: Mapping[str, list[EventHook]] | None = None,
) -> dict[str, Any]:
    """
    Keyword arguments for the underlying httpx.AsyncClient.

    The proxy is only applied without a custom transport, since httpx would
    route every request through its own proxy transport otherwise.
    """
    proxy = None
    if config.proxy is not None and transport is None:
        proxy = config.proxy.url
    return {
        "base_url": config.api_url,
        "timeout": config.timeout,
        "transport": transport,
        "proxy": proxy,
        "event_hooks": dict(event_hooks) if event_hooks else None,
        "headers": {"User-Agent": config.user_agent},
    }


class AsyncHttpClient:
    """Async HTTP client for the Docbox archive API."""

    def __init__(
        self,
        config: DocboxConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        event_hooks: Mapping[str, list[EventHook]] | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
            event_hooks: Optional httpx request/response hooks.
        """
        self._config = config
        self._transport = transport
        self._event_hooks = dict(event_hooks) if event_hooks else None
        self._headers = build_headers(config)

        self._client: httpx.AsyncClient | None = None
        self._client_lock = asyncio.Lock()
        self._users = 0

    async def __aenter__(self) -> Self:
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._close()

    @property
    def api_url(self) -> str:
        return self._config.api_url

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    **client_options(
                        self._config, transport=self._transport, event_hooks=self._event_hooks
                    )
                )
                # Accept is set per request, httpx would add "*/*" otherwise
                self._client.headers.pop("Accept", None)
            self._users += 1
        return self._client

    async def _close(self) -> None:
        """Close the HTTP client once the last context manager exits."""
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            self._users -= 1
            if self._users > 0:
                logger.debug("Skipping close, client still in use", count=self._users)
                return
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, etc.).
            endpoint: API endpoint relative to the API root (e.g., "/inboxes").
            params: Query parameters; ``None`` values are dropped.
            json: JSON body.
            data: Multipart form fields, sent together with ``files``.
            files: Multipart file parts.
            headers: Extra headers overriding the defaults.

        Returns:
            Decoded JSON, ``{}`` for an empty body, or the raw text for
            non-JSON responses.

        Raises:
            NetworkError: If the API could not be reached.
            APIError: If the API answered with a non-2xx status.
            ResponseDecodeError: If a response body could not be decoded.
        """
        if self._client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        request_headers = dict(self._headers)
        if headers:
            request_headers.update(headers)
        if files is not None:
            # httpx sets the multipart Content-Type with its boundary
            request_headers.pop("Accept", None)

        query = encode_query(params) if params else None
        logger.debug(
            "Sending request",
            method=method,
            url=f"{self._config.api_url}{endpoint}",
            params=query,
            headers=sanitize_headers(request_headers),
        )

        try:
            response = await self._client.request(
                method,
                endpoint,
                params=query or None,
                json=json,
                data=data,
                files=files,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            logger.warning("Request timed out", method=method, endpoint=endpoint)
            msg = f"Request timed out: {e}"
            raise DocboxTimeoutError(msg, endpoint=endpoint) from e
        except httpx.DecodingError as e:
            logger.warning("Undecodable response body", method=method, endpoint=endpoint)
            msg = f"Could not decode response body: {e}"
            raise ResponseDecodeError(msg, endpoint=endpoint) from e
        except httpx.TransportError as e:
            logger.warning(
                "Request failed", method=method, endpoint=endpoint, error_type=type(e).__name__
            )
            msg = f"Network error: {e}"
            raise NetworkError(msg, endpoint=endpoint) from e

        logger.debug("Received response", endpoint=endpoint, status=response.status_code)

        if not response.is_success:
            self._raise_api_error(response, endpoint)

        return self._decode(response, endpoint)

    @staticmethod
    def _decode(response: httpx.Response, endpoint: str) -> Any:
        if (
            response.status_code == httpx.codes.NO_CONTENT
            or response.headers.get("content-length") == "0"
            or not response.content
        ):
            return {}

        media_type = response.headers.get("content-type", "").split(";")[0].strip().lower()
        if media_type == "application/json" or media_type.endswith("+json"):
            try:
                return response.json()
            except ValueError as e:
                raise ResponseDecodeError(
                    "Invalid JSON response from API",
                    http_status=response.status_code,
                    response_body=response.text,
                    endpoint=endpoint,
                ) from e

        return response.text

    @staticmethod
    def _raise_api_error(response: httpx.Response, endpoint: str) -> None:
        status = response.status_code
        body = _error_body(response)
        detail = _remote_message(body) or response.reason_phrase or f"HTTP {status}"
        msg = f"API request failed: {detail}"

        logger.debug("API error", endpoint=endpoint, status=status)

        if status in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
            raise AuthenticationError(
                msg, status_code=status, response_body=body, endpoint=endpoint
            )
        if status == httpx.codes.NOT_FOUND:
            raise NotFoundError(msg, response_body=body, endpoint=endpoint)
        if status == httpx.codes.TOO_MANY_REQUESTS:
            raise RateLimitError(
                msg,
                retry_after=_retry_after(response),
                response_body=body,
                endpoint=endpoint,
            )
        if status >= httpx.codes.INTERNAL_SERVER_ERROR:
            raise ServerError(msg, status_code=status, response_body=body, endpoint=endpoint)
        raise APIError(msg, status_code=status, response_body=body, endpoint=endpoint)


def _error_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _remote_message(body: Any) -> str | None:
    if isinstance(body, dict):
        for key in _MESSAGE_KEYS:
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None
    if isinstance(body, str):
        text = body.strip()
        if text and "\n" not in text and len(text) <= _MAX_TEXT_MESSAGE:
            return text
    return None


def _retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("retry-after", "")
    return int(value) if value.isdigit() else None
