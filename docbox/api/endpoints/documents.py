"""Document listing, upload and search endpoints."""

from collections.abc import Mapping, Sequence
from dataclasses import fields
from datetime import date
from typing import Any, BinaryIO

from docbox.api.endpoints._parsing import as_object, decoding, optional_int, optional_strings
from docbox.api.http_client import AsyncHttpClient, build_query, format_query_value
from docbox.models.document import (
    Document,
    DocumentListResult,
    FileUploadResult,
    SearchHit,
    SearchPage,
    SearchQuery,
    SearchResult,
)

DOCUMENT_LIST = "/document/list"
FILE_UPLOAD = "/file-upload"
SEARCH = "/search"

_DOCUMENT_LIST_PARAMS = {
    "folder_id": "folder-id",
    "included_metadata_keys": "included-metadata-keys",
    # wire name as published by the archive API
    "excluded_metadata_keys": "excluded-matadata-keys",
    "with_autoexport_status": "with-autoexport-status",
    "filter_date_created_after": "filter-date-created-after",
    "subfolders_recursive": "subfolders-recursive",
}

_SEARCH_PARAMS = {f.name: f.name.replace("_", "-") for f in fields(SearchQuery)}

_UPLOAD_FIELDS = {
    "target_mandator_name": "targetMandatorName",
    "target_folder_path": "targetFolderPath",
    "target_folder_id": "targetFolderId",
    "target_document_name": "targetDocumentName",
    "keywords": "keywords",
    "document_types": "documentTypes",
    "external_id": "externalId",
    "external_metadata": "externalMetadatas",
    "email_import_order": "emailImportOrder",
    "force_new_document": "forceNewDocument",
}


async def list_documents(
    http: AsyncHttpClient,
    folder_id: int,
    *,
    included_metadata_keys: str | Sequence[str] | None = None,
    excluded_metadata_keys: str | Sequence[str] | None = None,
    with_autoexport_status: bool | None = None,
    filter_date_created_after: date | str | None = None,
    subfolders_recursive: bool | None = None,
) -> DocumentListResult:
    """
    List the documents of a folder.

    Args:
        http: Open HTTP client.
        folder_id: Folder to list.
        included_metadata_keys: Metadata keys to return with each document.
        excluded_metadata_keys: Metadata keys to leave out.
        with_autoexport_status: Return the autoexport status of each document.
        filter_date_created_after: Only documents created after this date.
            Datetimes are reduced to their calendar date.
        subfolders_recursive: Include documents of all subfolders.
    """
    params = build_query(
        _DOCUMENT_LIST_PARAMS,
        folder_id=folder_id,
        included_metadata_keys=included_metadata_keys or None,
        excluded_metadata_keys=excluded_metadata_keys or None,
        with_autoexport_status=with_autoexport_status,
        filter_date_created_after=filter_date_created_after or None,
        subfolders_recursive=subfolders_recursive,
    )
    response = await http.request("GET", DOCUMENT_LIST, params=params)

    with decoding(DOCUMENT_LIST, response):
        if isinstance(response, list):
            data: dict[str, Any] = {"documents": response}
        else:
            data = as_object(response, DOCUMENT_LIST)
        return DocumentListResult(
            documents=tuple(_parse_document(d) for d in data.get("documents") or ()),
            total=optional_int(data.get("total")),
        )


async def upload_file(
    http: AsyncHttpClient,
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
    """
    Upload a file as a multipart form.

    Optional fields are sent only when given. Uploads are not idempotent:
    sending the same file twice may create two documents unless
    ``force_new_document`` is false and the archive deduplicates it.

    Args:
        http: Open HTTP client.
        file_data: File content or a binary file object.
        file_name: Original file name.
        target_mandator_name: Mandator receiving the document.
        target_folder_path: Destination folder path.
        target_folder_id: Destination folder id.
        target_document_name: Document name to use instead of the file name.
        keywords: Keywords, sent comma separated.
        document_types: Document types, sent comma separated.
        external_id: Caller-side identifier of the document.
        external_metadata: Key/value metadata, sent as a JSON string.
        email_import_order: Email import order.
        force_new_document: Always create a new document.
    """
    if not file_name:
        msg = "file name must not be empty"
        raise ValueError(msg)

    form = build_upload_form(
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
    files = {"uploadData": (file_name, file_data)}
    response = await http.request("POST", FILE_UPLOAD, data=form, files=files)

    with decoding(FILE_UPLOAD, response):
        data = as_object(response, FILE_UPLOAD)
        return FileUploadResult(
            success=bool(data.get("success", False)),
            document_id=optional_int(data.get("documentId")),
            message=data.get("message"),
        )


def build_upload_form(**values: Any) -> dict[str, str]:
    """
    Build the optional upload form fields.

    ``None`` and empty values are left out so that no empty parts are sent.
    """
    form = {}
    for name, part in _UPLOAD_FIELDS.items():
        value = values.pop(name, None)
        if value is None or (not isinstance(value, (bool, int)) and not value):
            continue
        form[part] = format_query_value(value)
    if values:
        msg = f"unknown upload fields: {', '.join(sorted(values))}"
        raise TypeError(msg)
    return form


async def search(http: AsyncHttpClient, query: SearchQuery | None = None) -> SearchResult:
    """
    Search documents.

    Args:
        http: Open HTTP client.
        query: Search filters. Without filters the archive API decides what
            an unrestricted search returns.
    """
    query = query or SearchQuery()
    params = build_query(_SEARCH_PARAMS, **{name: getattr(query, name) for name in _SEARCH_PARAMS})
    response = await http.request("POST", SEARCH, params=params)

    with decoding(SEARCH, response):
        data = as_object(response, SEARCH)
        return SearchResult(
            total_hit_documents=int(data.get("totalHitDocuments") or 0),
            documents=tuple(_parse_search_hit(d) for d in data.get("documents") or ()),
        )


def _parse_document(data: dict[str, Any]) -> Document:
    metadata = data.get("metadata")
    return Document(
        id=int(data["id"]),
        name=data["name"],
        folder_id=optional_int(data.get("folderId")),
        folder_path=data.get("folderPath"),
        created_at=data.get("createdAt"),
        modified_at=data.get("modifiedAt"),
        keywords=optional_strings(data.get("keywords")),
        document_types=optional_strings(data.get("documentTypes")),
        external_id=data.get("externalId"),
        metadata=dict(metadata) if metadata is not None else None,
        autoexport_status=data.get("autoexportStatus"),
    )


def _parse_search_hit(data: dict[str, Any]) -> SearchHit:
    return SearchHit(
        id=int(data["id"]),
        name=data["name"],
        folder_id=optional_int(data.get("folderId")),
        folder_path=data.get("folderPath"),
        creation_date=data.get("creationDate"),
        pages=tuple(
            SearchPage(id=int(p["id"]), hit=bool(p.get("hit", False)))
            for p in data.get("pages") or ()
        ),
    )
