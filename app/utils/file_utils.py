import mimetypes
import unicodedata
from datetime import datetime, timezone
from app.storage.base import FileEntry

THUMBNAIL_PREFIXES = ('image/', 'video/')


def get_mime_type(file_path: str) -> str:
    """
    Get MIME type of a file

    Args:
        file_path: Path to the file

    Returns:
        str: MIME type of the file
    """
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type or 'application/octet-stream'


def has_thumbnail(mime_type: str) -> bool:
    return bool(mime_type) and mime_type.startswith(THUMBNAIL_PREFIXES)


def build_thumbnail_url(base_url: str, file_id: str, mime_type: str, width: int = 400) -> str | None:
    """
    Get the thumbnail link of a file

    Args:
        base_url: Thumbnail endpoint
        file_id: Id of the file
        mime_type: MIME type of the file
        width: Target width in pixels

    Returns:
        str: Thumbnail URL for images and videos, None for anything else
    """
    if not has_thumbnail(mime_type):
        return None
    return f'{base_url}?id={file_id}&sz=w{width}'


def utc_isoformat(value: datetime | None) -> str | None:
    """ISO 8601 text of a stored timestamp; naive values are UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def name_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive, accent-aware ordering key for display names"""
    normalized = unicodedata.normalize('NFKD', name or '')
    folded = ''.join(c for c in normalized if not unicodedata.combining(c)).casefold()
    return folded, name or ''


def file_to_dict(file: FileEntry, remarks: dict[str, str], thumbnail_base_url: str,
                 thumbnail_width: int = 400) -> dict:
    return {
        'id': file.id,
        'name': file.name,
        'mimeType': file.mime_type,
        'size': file.size,
        'lastModified': utc_isoformat(file.updated_at),
        'url': file.url,
        'thumbnailUrl': build_thumbnail_url(thumbnail_base_url, file.id, file.mime_type, thumbnail_width),
        'remarks': remarks.get(file.id, '')
    }
