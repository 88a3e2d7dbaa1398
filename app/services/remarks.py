"""
Remarks attached to files, kept in the ``file_remarks`` table and served
through a short-lived in-process cache.
"""
import logging
import threading
import time
from typing import Callable
from cachetools import TTLCache
from app.extensions import db
from app.models.remark import FileRemark
from app.storage.base import StorageProvider

logger = logging.getLogger(__name__)


class RemarksStore:
    """
    Reads and writes the remarks table, one row per file id.

    Args:
        provider: Storage provider used to resolve the file being annotated
        on_change: Called after every successful write
    """

    def __init__(self, provider: StorageProvider, on_change: Callable[[], None] = None) -> None:
        self.provider = provider
        self.on_change = on_change

    def get_all(self) -> dict[str, str]:
        remarks = {}
        for record in FileRemark.query.order_by(FileRemark.row).all():
            if record.file_id:
                remarks[record.file_id] = record.remarks or ''
        return remarks

    def export_rows(self) -> list[list]:
        return [record.to_row() for record in FileRemark.query.order_by(FileRemark.row).all()]

    def upsert(self, file_id: str, file_name: str, file_type: str, parent_folder_id: str,
               folder_path: str, remarks: str) -> dict:
        """Save the remark of a file, updating its existing row when there is one"""
        try:
            file = self.provider.get_file(file_id)

            record = FileRemark.query.filter_by(file_id=file_id).first()
            if record is None:
                record = FileRemark(file_id=file_id)
                db.session.add(record)

            record.file_name = file_name
            record.file_type = file_type
            record.parent_folder_id = parent_folder_id
            record.folder_path = folder_path
            record.remarks = remarks
            record.last_modified = file.updated_at
            record.file_url = file.url

            db.session.commit()
        except Exception as e:
            db.session.rollback()
            logger.exception('Failed to save remarks for %s', file_id)
            return {'success': False, 'error': str(e)}

        if self.on_change is not None:
            self.on_change()

        return {'success': True, 'message': 'Remarks saved'}


class RemarksCache:
    """
    Memoizes the full remarks map for ``ttl`` seconds.

    A failed load is not cached and reads as an empty map, so listings keep
    working without remarks. TTLCache is not thread-safe, so every access
    holds the lock; the loader runs outside it.
    """

    _KEY = 'remarks'

    def __init__(self, loader: Callable[[], dict[str, str]], ttl: float = 30,
                 timer: Callable[[], float] = time.monotonic) -> None:
        self.loader = loader
        self._cache = TTLCache(maxsize=1, ttl=ttl, timer=timer)
        self._lock = threading.Lock()

    def get_all(self) -> dict[str, str]:
        with self._lock:
            remarks = self._cache.get(self._KEY)
        if remarks is not None:
            return remarks

        try:
            remarks = self.loader()
        except Exception as e:
            logger.warning('Could not load remarks: %s', e)
            return {}

        with self._lock:
            self._cache[self._KEY] = remarks
        return remarks

    def invalidate(self) -> None:
        with self._lock:
            self._cache.clear()
