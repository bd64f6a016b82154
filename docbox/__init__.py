"""
Docbox Python Client.

An async Python client for the Docbox document archive API.

Example:
    ```python
    from docbox import DocboxClient, DocboxConfig

    config = DocboxConfig(
        base_url="https://docbox.example.com",
        api_key="your-api-key",
        cloud_id="your-cloud-id",  # cloud version only
    )

    async with DocboxClient(config) as client:
        archive = await client.get_archive_structure()
        for folder in archive.walk():
            print(folder.id, folder.name)

        hits = await client.search(document_name_terms="invoice", pagination_size=100)
    ```
"""

__version__ = "0.1.0"

from docbox.client import DocboxClient
from docbox.config import DocboxConfig, ProxyConfig
from docbox.exceptions import (
    APIError,
    AuthenticationError,
    DocboxError,
    DocboxTimeoutError,
    ErrorKind,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ResponseDecodeError,
    ServerError,
)
from docbox.models import (
    ArchiveStructure,
    Document,
    DocumentListResult,
    FileUploadResult,
    Folder,
    FolderCreateResult,
    Inbox,
    InboxListResult,
    SearchHit,
    SearchPage,
    SearchQuery,
    SearchResult,
)

__all__ = [
    # Main client
    "DocboxClient",
    "DocboxConfig",
    "ProxyConfig",
    # Models
    "ArchiveStructure",
    "Folder",
    "FolderCreateResult",
    "Inbox",
    "InboxListResult",
    "Document",
    "DocumentListResult",
    "FileUploadResult",
    "SearchQuery",
    "SearchHit",
    "SearchPage",
    "SearchResult",
    # Exceptions
    "DocboxError",
    "ErrorKind",
    "NetworkError",
    "DocboxTimeoutError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ResponseDecodeError",
]
