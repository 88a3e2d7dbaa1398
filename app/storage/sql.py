from datetime import datetime
from sqlalchemy.exc import SQLAlchemyError
from app.extensions import db
from app.models.file import Folder, File, folder_parents, file_parents
from app.storage.base import StorageProvider, StorageError, ItemNotFound, FolderEntry, FileEntry


class SQLStorageProvider(StorageProvider):
    """
    Storage provider backed by the application's own database.

    Args:
        base_url: Prefix of the canonical links handed out for folders and files
    """

    def __init__(self, base_url: str = '') -> None:
        self.base_url = base_url.rstrip('/')

    def folder_url(self, folder_id: str) -> str:
        return f'{self.base_url}/?folder={folder_id}'

    def file_url(self, file_id: str) -> str:
        return f'{self.base_url}/files/raw/{file_id}'

    def _folder_entry(self, folder: Folder) -> FolderEntry:
        return FolderEntry(id=folder.id, name=folder.name, url=self.folder_url(folder.id))

    def _file_entry(self, file: File) -> FileEntry:
        return FileEntry(
            id=file.id,
            name=file.name,
            mime_type=file.mime_type,
            size=file.size or 0,
            updated_at=file.updated_at,
            url=self.file_url(file.id)
        )

    def _load_folder(self, folder_id: str) -> Folder:
        folder = db.session.get(Folder, folder_id) if folder_id else None
        if folder is None:
            raise ItemNotFound('Folder', folder_id)
        return folder

    def _load_file(self, file_id: str) -> File:
        file = db.session.get(File, file_id) if file_id else None
        if file is None:
            raise ItemNotFound('File', file_id)
        return file

    def get_folder(self, folder_id: str) -> FolderEntry:
        return self._folder_entry(self._load_folder(folder_id))

    def get_file(self, file_id: str) -> FileEntry:
        return self._file_entry(self._load_file(file_id))

    def list_folders(self, folder_id: str) -> list[FolderEntry]:
        self._load_folder(folder_id)
        children = (
            Folder.query
            .join(folder_parents, folder_parents.c.folder_id == Folder.id)
            .filter(folder_parents.c.parent_id == folder_id)
            .order_by(folder_parents.c.linked_at, Folder.created_at)
            .all()
        )
        return [self._folder_entry(child) for child in children]

    def list_files(self, folder_id: str) -> list[FileEntry]:
        self._load_folder(folder_id)
        files = (
            File.query
            .join(file_parents, file_parents.c.file_id == File.id)
            .filter(file_parents.c.folder_id == folder_id)
            .order_by(file_parents.c.linked_at, File.created_at)
            .all()
        )
        return [self._file_entry(file) for file in files]

    def has_folders(self, folder_id: str) -> bool:
        self._load_folder(folder_id)
        query = db.session.query(folder_parents.c.folder_id).filter(folder_parents.c.parent_id == folder_id)
        return bool(db.session.query(query.exists()).scalar())

    def get_parents(self, item_id: str) -> list[FolderEntry]:
        item = db.session.get(Folder, item_id) if item_id else None
        if item is None:
            item = self._load_file(item_id)
        return [self._folder_entry(parent) for parent in item.parents]

    def add_parent(self, folder_id: str, parent_id: str) -> None:
        folder = self._load_folder(folder_id)
        parent = self._load_folder(parent_id)
        if parent not in folder.parents:
            folder.parents.append(parent)
        self._commit()

    def remove_parent(self, folder_id: str, parent_id: str) -> None:
        folder = self._load_folder(folder_id)
        parent = self._load_folder(parent_id)
        if parent in folder.parents:
            folder.parents.remove(parent)
        self._commit()

    def create_folder(self, parent_id: str, name: str) -> FolderEntry:
        parent = self._load_folder(parent_id)
        folder = Folder(name=name)
        folder.parents.append(parent)
        db.session.add(folder)
        self._commit()
        return self._folder_entry(folder)

    def rename_folder(self, folder_id: str, name: str) -> FolderEntry:
        folder = self._load_folder(folder_id)
        folder.name = name
        folder.updated_at = datetime.utcnow()
        self._commit()
        return self._folder_entry(folder)

    def add_file(self, parent_id: str, name: str, mime_type: str, size: int,
                 file_path: str = None, updated_at: datetime = None) -> FileEntry:
        """Register a file under a folder; used by the import command."""
        parent = self._load_folder(parent_id)
        file = File(name=name, mime_type=mime_type, size=size, file_path=file_path, updated_at=updated_at)
        file.parents.append(parent)
        db.session.add(file)
        self._commit()
        return self._file_entry(file)

    def get_file_path(self, file_id: str) -> str | None:
        return self._load_file(file_id).file_path

    def _commit(self) -> None:
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError(str(e)) from e
