"""
Document-related domain models.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True, kw_only=True)
class Document:
    """
    A document stored in the archive.

    Timestamps are kept exactly as the archive API sends them.
    """

    id: int
    name: str
    folder_id: int | None = None
    folder_path: str | None = None
    created_at: str | None = None
    modified_at: str | None = None
    keywords: tuple[str, ...] | None = None
    document_types: tuple[str, ...] | None = None
    external_id: str | None = None
    metadata: Mapping[str, Any] | None = None
    autoexport_status: str | None = None


@dataclass(frozen=True, kw_only=True)
class DocumentListResult:
    documents: tuple[Document, ...] = ()
    total: int | None = None


@dataclass(frozen=True, kw_only=True)
class FileUploadResult:
    success: bool = False
    document_id: int | None = None
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class SearchQuery:
    """
    Filters for a document search.

    Every filter is optional; only the ones that are set are sent. Term and
    id filters accept a single string or a sequence, which is sent comma
    separated.

    Attributes:
        pagination_page: Zero-based result page.
        pagination_size: Number of hits per page.
        document_name_terms: Terms matched against document names.
        fulltext_all_terms: Every term must match the document text.
        fulltext_one_terms: At least one term must match.
        fulltext_none_terms: No term may match.
        filter_date_created_after: Lower bound of the creation date.
        filter_date_created_before: Upper bound of the creation date.
        filter_date_modified_after: Lower bound of the modification date.
        filter_date_modified_before: Upper bound of the modification date.
        stamp_ids: Only documents carrying these stamps.
        stamp_names: Only documents carrying stamps with these names.
        folder_id: Restrict the search to a folder.
        folder_path: Restrict the search to a folder path.
        subfolders_recursive: Include subfolders of the folder filter.
        workflow_ids: Only documents in these workflows.
        workflow_states: Only documents in these workflow states.
        include_trash: Include trashed documents.
        external_id: Match the external id given at upload.
        external_metadata: Match external metadata key/value pairs.
        document_types: Only documents of these types.
        keywords: Only documents with these keywords.
    """

    pagination_page: int | None = None
    pagination_size: int | None = None
    document_name_terms: str | Sequence[str] | None = None
    fulltext_all_terms: str | Sequence[str] | None = None
    fulltext_one_terms: str | Sequence[str] | None = None
    fulltext_none_terms: str | Sequence[str] | None = None
    filter_date_created_after: date | str | None = None
    filter_date_created_before: date | str | None = None
    filter_date_modified_after: date | str | None = None
    filter_date_modified_before: date | str | None = None
    stamp_ids: int | Sequence[int] | None = None
    stamp_names: str | Sequence[str] | None = None
    folder_id: int | None = None
    folder_path: str | None = None
    subfolders_recursive: bool | None = None
    workflow_ids: int | Sequence[int] | None = None
    workflow_states: str | Sequence[str] | None = None
    include_trash: bool | None = None
    external_id: str | None = None
    external_metadata: Mapping[str, str] | None = None
    document_types: str | Sequence[str] | None = None
    keywords: str | Sequence[str] | None = None

    def __post_init__(self) -> None:
        if self.pagination_page is not None and self.pagination_page < 0:
            msg = "pagination_page must be non-negative"
            raise ValueError(msg)
        if self.pagination_size is not None and self.pagination_size <= 0:
            msg = "pagination_size must be positive"
            raise ValueError(msg)


@dataclass(frozen=True, kw_only=True)
class SearchPage:
    id: int
    hit: bool = False


@dataclass(frozen=True, kw_only=True)
class SearchHit:
    """A document matched by a search."""

    id: int
    name: str
    folder_id: int | None = None
    folder_path: str | None = None
    creation_date: str | None = None
    pages: tuple[SearchPage, ...] = ()

    @property
    def hit_pages(self) -> tuple[SearchPage, ...]:
        """Pages on which the search terms were found."""
        return tuple(page for page in self.pages if page.hit)


@dataclass(frozen=True, kw_only=True)
class SearchResult:
    total_hit_documents: int = 0
    documents: tuple[SearchHit, ...] = ()
