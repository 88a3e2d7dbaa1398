from flask import Flask, current_app
from app.services.folders import FolderService
from app.services.hierarchy import FolderPathResolver
from app.services.listing import FolderListingService
from app.services.remarks import RemarksCache, RemarksStore
from app.services.search import SearchService
from app.storage.base import StorageProvider
from app.storage.sql import SQLStorageProvider


class Drive:
    """The services behind the folder browser, shared by every request of an app."""

    def __init__(self, provider: StorageProvider, root_id: str, hop_limit: int = 20,
                 cache_seconds: float = 30, max_results: int = 50,
                 thumbnail_base_url: str = '/thumbnail', thumbnail_width: int = 400,
                 timer=None) -> None:
        self.provider = provider
        self.root_id = root_id

        self.remarks_store = RemarksStore(provider)
        cache_kwargs = {'timer': timer} if timer is not None else {}
        self.remarks_cache = RemarksCache(self.remarks_store.get_all, ttl=cache_seconds, **cache_kwargs)
        self.remarks_store.on_change = self.remarks_cache.invalidate

        self.paths = FolderPathResolver(provider, root_id, hop_limit)
        self.listing = FolderListingService(provider, self.remarks_cache, self.paths, root_id,
                                            thumbnail_base_url, thumbnail_width)
        self.search = SearchService(provider, self.remarks_cache, root_id,
                                    thumbnail_base_url, thumbnail_width, max_results)
        self.folders = FolderService(provider, root_id, hop_limit)


def init_services(app: Flask, provider: StorageProvider = None) -> Drive:
    if provider is None:
        provider = SQLStorageProvider(app.config.get('PUBLIC_BASE_URL', ''))

    drive = Drive(
        provider,
        root_id=app.config['ROOT_FOLDER_ID'],
        hop_limit=app.config.get('MAX_FOLDER_HOPS', 20),
        cache_seconds=app.config.get('REMARKS_CACHE_SECONDS', 30),
        max_results=app.config.get('SEARCH_MAX_RESULTS', 50),
        thumbnail_base_url=app.config.get('THUMBNAIL_BASE_URL', '/thumbnail'),
        thumbnail_width=app.config.get('THUMBNAIL_WIDTH', 400)
    )
    app.extensions['drive'] = drive
    return drive


def get_drive() -> Drive:
    return current_app.extensions['drive']
