"""
Docbox client facade.

This is the main entry point for users of the library. Each method maps to
exactly one archive API call and either returns an immutable result or raises
a DocboxError.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any, BinaryIO, Self

import httpx
import structlog

from docbox.api.endpoints import archive, documents
from docbox.api.http_client import AsyncHttpClient, EventHook
from docbox.config import DocboxConfig
from docbox.models.archive import ArchiveStructure, FolderCreateResult, InboxListResult
from docbox.models.document import (
    DocumentListResult,
    FileUploadResult,
    SearchQuery,
    SearchResult,
)

logger = structlog.get_logger(__name__)


class DocboxClient:
    """
    Async client for the Docbox archive API.

    Example:
        ```python
        config = DocboxConfig(base_url="https://docbox.example.com", api_key="key")

        async with DocboxClient(config) as client:
            archive = await client.get_archive_structure()
            docs = await client.list_documents(123, subfolders_recursive=True)

            with open("invoice.pdf", "rb") as f:
                result = await client.upload_file(f, "invoice.pdf", target_folder_id=123)
        ```

    Calls are independent of each other and may run concurrently. Nothing is
    retried; a failed upload may or may not have created a document.

    Args:
        config: Client configuration.
        transport: Optional httpx transport for testing (mock transport).
        event_hooks: Optional httpx event hooks, e.g. ``{"request": [log_request]}``.
    """

    def __init__(
        self,
        config: DocboxConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        event_hooks: Mapping[str, list[EventHook]] | None = None,
    ) -> None:
        self._config = config
        self._http = AsyncHttpClient(config, transport=transport, event_hooks=event_hooks)

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._http.__aenter__()
        logger.debug("Client initialized", api_url=self._config.api_url)
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self._http.__aexit__(exc_type, exc_val, exc_tb)
        logger.debug("Client closed")

    @property
    def config(self) -> DocboxConfig:
        return self._config

    async def get_archive_structure(self, parent_folder_id: int | None = None) -> ArchiveStructure:
        """Get the archive folder tree, or the branch below ``parent_folder_id``."""
        return await archive.get_archive_structure(self._http, parent_folder_id)

    async def list_documents(
        self,
        folder_id: int,
        *,
        included_metadata_keys: str | Sequence[str] | None = None,
        excluded_metadata_keys: str | Sequence[str] | None = None,
        with_autoexport_status: bool | None = None,
        filter_date_created_after: date | str | None = None,
        subfolders_recursive: bool | None = None,
    ) -> DocumentListResult:
        """List the documents of a folder."""
        return await documents.list_documents(
            self._http,
            folder_id,
            included_metadata_keys=included_metadata_keys,
            excluded_metadata_keys=excluded_metadata_keys,
            with_autoexport_status=with_autoexport_status,
            filter_date_created_after=filter_date_created_after,
            subfolders_recursive=subfolders_recursive,
        )

    async def upload_file(
        self,
        file_data: bytes | BinaryIO,
        file_name: str,
        *,
        target_mandator_name: str | None = None,
        target_folder_path: str | None = None,
        target_folder_id: int | None = None,
        target_document_name: str | None = None,
        keywords: Sequence[str] | None = None,
        document_types: Sequence[str] | None = None,
        external_id: str | None = None,
        external_metadata: Mapping[str, str] | None = None,
        email_import_order: str | None = None,
        force_new_document: bool | None = None,
    ) -> FileUploadResult:
        """Upload a file. Only the fields given are sent."""
        return await documents.upload_file(
            self._http,
            file_data,
            file_name,
            target_mandator_name=target_mandator_name,
            target_folder_path=target_folder_path,
            target_folder_id=target_folder_id,
            target_document_name=target_document_name,
            keywords=keywords,
            document_types=document_types,
            external_id=external_id,
            external_metadata=external_metadata,
            email_import_order=email_import_order,
            force_new_document=force_new_document,
        )

    async def create_folder(
        self,
        name: str,
        *,
        parent_folder_id: int | None = None,
        parent_folder_path: str | None = None,
    ) -> FolderCreateResult:
        """Create a folder below a parent given by id or by path."""
        return await archive.create_folder(
            self._http,
            name,
            parent_folder_id=parent_folder_id,
            parent_folder_path=parent_folder_path,
        )

    async def list_inboxes(self) -> InboxListResult:
        """Get all inbox folders."""
        return await archive.list_inboxes(self._http)

    async def search(self, query: SearchQuery | None = None, **filters: Any) -> SearchResult:
        """
        Search documents.

        Filters can be given as a SearchQuery or as its field names:

            await client.search(document_name_terms="invoice", pagination_size=100)

        Args:
            query: Prepared search filters.
            **filters: SearchQuery fields, used when ``query`` is not given.

        Raises:
            TypeError: If both ``query`` and keyword filters are given, or a
                filter name is unknown.
        """
        if query is not None and filters:
            msg = "pass either a SearchQuery or keyword filters, not both"
            raise TypeError(msg)
        if query is None:
            query = SearchQuery(**filters)
        return await documents.search(self._http, query)
