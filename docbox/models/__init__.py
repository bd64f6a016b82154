"""
Domain models for the Docbox archive API.

These are immutable (frozen) dataclasses mirroring the JSON the API returns.
"""

from docbox.models.archive import (
    ArchiveStructure,
    Folder,
    FolderCreateResult,
    Inbox,
    InboxListResult,
)
from docbox.models.document import (
    Document,
    DocumentListResult,
    FileUploadResult,
    SearchHit,
    SearchPage,
    SearchQuery,
    SearchResult,
)

__all__ = [
    # Archive
    "Folder",
    "ArchiveStructure",
    "FolderCreateResult",
    "Inbox",
    "InboxListResult",
    # Documents
    "Document",
    "DocumentListResult",
    "FileUploadResult",
    # Search
    "SearchQuery",
    "SearchPage",
    "SearchHit",
    "SearchResult",
]
