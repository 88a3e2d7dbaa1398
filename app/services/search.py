import logging
from app.services.remarks import RemarksCache
from app.storage.base import StorageProvider
from app.utils.file_utils import file_to_dict

logger = logging.getLogger(__name__)

PATH_SEPARATOR = ' > '


class SearchContext:
    """Matches collected by one search call, capped at ``max_results``."""

    def __init__(self, query: str, remarks: dict[str, str], max_results: int) -> None:
        self.query = query
        self.remarks = remarks
        self.max_results = max_results
        self.folders = []
        self.files = []
        self.found = 0
        self.visited = set()

    @property
    def full(self) -> bool:
        return self.found >= self.max_results

    def matches(self, name: str) -> bool:
        return self.query in (name or '').lower()


class SearchService:
    def __init__(self, provider: StorageProvider, remarks: RemarksCache, root_id: str,
                 thumbnail_base_url: str, thumbnail_width: int = 400, max_results: int = 50) -> None:
        self.provider = provider
        self.remarks = remarks
        self.root_id = root_id
        self.thumbnail_base_url = thumbnail_base_url
        self.thumbnail_width = thumbnail_width
        self.max_results = max_results

    def search(self, query: str, start_folder_id: str = None) -> dict:
        """
        Find folders and files whose name contains ``query``, ignoring case,
        anywhere below the start folder (root by default).

        Folders are visited depth first: the child folders of a folder are
        matched and descended into before its files are matched. Once
        ``max_results`` matches are collected the walk stops and the result
        is flagged as ``limited``.
        """
        start_folder_id = start_folder_id or self.root_id

        try:
            context = SearchContext(query.lower(), self.remarks.get_all(), self.max_results)
            start = self.provider.get_folder(start_folder_id)
            self._search_folder(context, start.id, start.name)

            return {
                'success': True,
                'results': {'folders': context.folders, 'files': context.files},
                'query': query,
                'limited': context.full
            }
        except Exception as e:
            logger.exception('Search for %r failed', query)
            return {
                'success': False,
                'error': str(e),
                'results': {'folders': [], 'files': []}
            }

    def _search_folder(self, context: SearchContext, folder_id: str, path: str) -> None:
        if context.full or folder_id in context.visited:
            return
        context.visited.add(folder_id)

        try:
            for child in self.provider.list_folders(folder_id):
                if context.full:
                    break

                child_path = path + PATH_SEPARATOR + child.name
                if context.matches(child.name):
                    context.folders.append({
                        'id': child.id,
                        'name': child.name,
                        'path': child_path,
                        'hasSubfolders': self.provider.has_folders(child.id)
                    })
                    context.found += 1

                self._search_folder(context, child.id, child_path)

            for file in self.provider.list_files(folder_id):
                if context.full:
                    break

                if context.matches(file.name):
                    match = file_to_dict(file, context.remarks, self.thumbnail_base_url, self.thumbnail_width)
                    match['path'] = path
                    context.files.append(match)
                    context.found += 1
        except Exception as e:
            # An unreadable folder only hides its own subtree.
            logger.warning('Skipping folder %s during search: %s', folder_id, e)
