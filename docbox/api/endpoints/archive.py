"""Archive structure, folder and inbox endpoints."""

from typing import Any

from docbox.api.endpoints._parsing import as_object, decoding, optional_int
from docbox.api.http_client import AsyncHttpClient, build_query
from docbox.models.archive import (
    ArchiveStructure,
    Folder,
    FolderCreateResult,
    Inbox,
    InboxListResult,
)

ARCHIVE_STRUCTURE = "/archivestructure"
FOLDER_CREATE = "/folder/create"
INBOXES = "/inboxes"

_ARCHIVE_STRUCTURE_PARAMS = {"parent_folder_id": "parent-folder-id"}


async def get_archive_structure(
    http: AsyncHttpClient, parent_folder_id: int | None = None
) -> ArchiveStructure:
    """
    Get the archive folder tree.

    Args:
        http: Open HTTP client.
        parent_folder_id: Only return the branch below this folder. Falsy
            values (``None``, ``0``) return the whole archive.
    """
    params = build_query(_ARCHIVE_STRUCTURE_PARAMS, parent_folder_id=parent_folder_id or None)
    response = await http.request("GET", ARCHIVE_STRUCTURE, params=params)

    with decoding(ARCHIVE_STRUCTURE, response):
        if isinstance(response, list):
            folders = response
        else:
            folders = as_object(response, ARCHIVE_STRUCTURE).get("folders") or []
        return ArchiveStructure(folders=tuple(_parse_folder(f) for f in folders))


async def create_folder(
    http: AsyncHttpClient,
    name: str,
    *,
    parent_folder_id: int | None = None,
    parent_folder_path: str | None = None,
) -> FolderCreateResult:
    """
    Create a folder below a parent given by id or by path.

    Both parents may be given; the archive API decides which one wins.
    """
    if not name:
        msg = "folder name must not be empty"
        raise ValueError(msg)

    body: dict[str, Any] = {"name": name}
    if parent_folder_id is not None:
        body["parentFolderId"] = parent_folder_id
    if parent_folder_path:
        body["parentFolderPath"] = parent_folder_path

    response = await http.request("POST", FOLDER_CREATE, json=body)

    with decoding(FOLDER_CREATE, response):
        data = as_object(response, FOLDER_CREATE)
        return FolderCreateResult(
            success=bool(data.get("success", False)),
            folder_id=optional_int(data.get("folderId")),
            message=data.get("message"),
        )


async def list_inboxes(http: AsyncHttpClient) -> InboxListResult:
    """Get all inbox folders."""
    response = await http.request("GET", INBOXES)

    with decoding(INBOXES, response):
        if isinstance(response, list):
            inboxes = response
        else:
            inboxes = as_object(response, INBOXES).get("inboxes") or []
        return InboxListResult(
            inboxes=tuple(
                Inbox(id=int(i["id"]), name=i["name"], path=i.get("path")) for i in inboxes
            )
        )


def _parse_folder(data: dict[str, Any]) -> Folder:
    return Folder(
        id=int(data["id"]),
        name=data["name"],
        parent_id=optional_int(data.get("parentId")),
        path=data.get("path"),
        subfolders=tuple(_parse_folder(f) for f in data.get("subfolders") or ()),
    )
