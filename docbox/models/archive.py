"""
Archive-related domain models.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, kw_only=True)
class Folder:
    """
    A folder in the archive structure.

    Subfolders are only populated when the archive API returns them nested.
    """

    id: int
    name: str
    parent_id: int | None = None
    path: str | None = None
    subfolders: tuple["Folder", ...] = ()

    def walk(self) -> Iterator[Self]:
        """Yield this folder and all of its descendants, depth first."""
        yield self
        for child in self.subfolders:
            yield from child.walk()

    def find(self, folder_id: int) -> Self | None:
        """Find a folder by id in this subtree."""
        for folder in self.walk():
            if folder.id == folder_id:
                return folder
        return None


@dataclass(frozen=True, kw_only=True)
class ArchiveStructure:
    """Folder tree of the archive, or of one branch of it."""

    folders: tuple[Folder, ...] = ()

    def walk(self) -> Iterator[Folder]:
        """Yield every folder in the structure, depth first."""
        for folder in self.folders:
            yield from folder.walk()

    def find(self, folder_id: int) -> Folder | None:
        """Find a folder by id anywhere in the structure."""
        for folder in self.walk():
            if folder.id == folder_id:
                return folder
        return None


@dataclass(frozen=True, kw_only=True)
class FolderCreateResult:
    success: bool = False
    folder_id: int | None = None
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class Inbox:
    """An inbox folder that receives incoming documents."""

    id: int
    name: str
    path: str | None = None


@dataclass(frozen=True, kw_only=True)
class InboxListResult:
    inboxes: tuple[Inbox, ...] = ()
