"""
Contract of the hierarchical file storage the folder tree is built on.

Identifiers are opaque strings. Every lookup of an unknown id raises
``ItemNotFound``; any other failure of the backing store is a ``StorageError``.
"""
from dataclasses import dataclass
from datetime import datetime


class StorageError(Exception):
    """Raised when the storage provider cannot complete a call."""


class ItemNotFound(StorageError):
    def __init__(self, kind: str, item_id: str) -> None:
        super().__init__(f'{kind} not found: {item_id}')
        self.kind = kind
        self.item_id = item_id


@dataclass(frozen=True)
class FolderEntry:
    id: str
    name: str
    url: str


@dataclass(frozen=True)
class FileEntry:
    id: str
    name: str
    mime_type: str
    size: int
    updated_at: datetime
    url: str


class StorageProvider:
    def get_folder(self, folder_id: str) -> FolderEntry:
        raise NotImplementedError

    def get_file(self, file_id: str) -> FileEntry:
        raise NotImplementedError

    def list_folders(self, folder_id: str) -> list[FolderEntry]:
        """Direct child folders, in storage order."""
        raise NotImplementedError

    def list_files(self, folder_id: str) -> list[FileEntry]:
        """Direct child files, in storage order."""
        raise NotImplementedError

    def has_folders(self, folder_id: str) -> bool:
        """True when the folder has at least one child folder."""
        raise NotImplementedError

    def get_parents(self, item_id: str) -> list[FolderEntry]:
        """Parent folders of a folder or a file, oldest link first."""
        raise NotImplementedError

    def add_parent(self, folder_id: str, parent_id: str) -> None:
        raise NotImplementedError

    def remove_parent(self, folder_id: str, parent_id: str) -> None:
        raise NotImplementedError

    def create_folder(self, parent_id: str, name: str) -> FolderEntry:
        raise NotImplementedError

    def rename_folder(self, folder_id: str, name: str) -> FolderEntry:
        raise NotImplementedError

    def get_file_path(self, file_id: str) -> str | None:
        """Local location of the file content, if the provider keeps one."""
        raise NotImplementedError
