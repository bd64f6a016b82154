"""
Docbox API client layer.

Provides async HTTP communication with the Docbox archive API.
"""

from docbox.api.http_client import (
    AsyncHttpClient,
    build_query,
    encode_query,
    format_query_value,
    sanitize_headers,
)

__all__ = [
    "AsyncHttpClient",
    "build_query",
    "encode_query",
    "format_query_value",
    "sanitize_headers",
]
