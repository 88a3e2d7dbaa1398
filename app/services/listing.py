import logging
from app.services.hierarchy import FolderPathResolver
from app.services.remarks import RemarksCache
from app.storage.base import StorageProvider
from app.utils.file_utils import file_to_dict, name_sort_key

logger = logging.getLogger(__name__)


class FolderListingService:
    def __init__(self, provider: StorageProvider, remarks: RemarksCache, resolver: FolderPathResolver,
                 root_id: str, thumbnail_base_url: str, thumbnail_width: int = 400) -> None:
        self.provider = provider
        self.remarks = remarks
        self.resolver = resolver
        self.root_id = root_id
        self.thumbnail_base_url = thumbnail_base_url
        self.thumbnail_width = thumbnail_width

    def root_info(self) -> dict:
        try:
            root = self.provider.get_folder(self.root_id)
        except Exception as e:
            logger.error('Root folder %s is not available: %s', self.root_id, e)
            return {
                'success': False,
                'error': 'Invalid root folder ID. Please update ROOT_FOLDER_ID in the configuration'
            }

        return {'success': True, 'name': root.name, 'id': root.id, 'url': root.url}

    def list_contents(self, folder_id: str = None) -> dict:
        """List the child folders and files of a folder, root by default"""
        folder_id = folder_id or self.root_id

        try:
            folder = self.provider.get_folder(folder_id)
            remarks = self.remarks.get_all()

            subfolders = [
                {
                    'id': child.id,
                    'name': child.name,
                    'hasSubfolders': self.provider.has_folders(child.id)
                }
                for child in self.provider.list_folders(folder.id)
            ]
            files = [
                file_to_dict(file, remarks, self.thumbnail_base_url, self.thumbnail_width)
                for file in self.provider.list_files(folder.id)
            ]

            subfolders.sort(key=lambda item: name_sort_key(item['name']))
            files.sort(key=lambda item: name_sort_key(item['name']))

            return {
                'success': True,
                'folders': subfolders,
                'files': files,
                'currentFolder': {'id': folder.id, 'name': folder.name},
                'folderPath': self.resolver.resolve(folder.id)
            }
        except Exception as e:
            logger.exception('Failed to list folder %s', folder_id)
            return {
                'success': False,
                'error': str(e),
                'folders': [],
                'files': [],
                'folderPath': []
            }
