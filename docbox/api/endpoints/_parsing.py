"""Helpers shared by the endpoint parsers."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from docbox.exceptions import ResponseDecodeError


@contextmanager
def decoding(endpoint: str, payload: Any) -> Iterator[None]:
    """Turn shape errors raised while parsing ``payload`` into ResponseDecodeError."""
    try:
        yield
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        msg = f"Unexpected response shape from {endpoint}"
        raise ResponseDecodeError(msg, response_body=payload, endpoint=endpoint) from e


def as_object(payload: Any, endpoint: str) -> dict[str, Any]:
    """Return ``payload`` if it is a JSON object, else fail decoding."""
    if not isinstance(payload, dict):
        msg = f"Expected a JSON object from {endpoint}, got {type(payload).__name__}"
        raise ResponseDecodeError(msg, response_body=payload, endpoint=endpoint)
    return payload


def optional_int(value: Any) -> int | None:
    return None if value is None else int(value)


def optional_strings(value: Any) -> tuple[str, ...] | None:
    """Accept a JSON list or a comma separated string."""
    if value is None:
        return None
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(item) for item in value)
