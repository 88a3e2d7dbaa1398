from app.storage.base import StorageProvider, StorageError, ItemNotFound, FolderEntry, FileEntry
from app.storage.sql import SQLStorageProvider
