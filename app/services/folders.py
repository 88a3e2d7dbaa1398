import logging
from app.services.hierarchy import DEFAULT_HOP_LIMIT, is_descendant_of
from app.storage.base import StorageProvider

logger = logging.getLogger(__name__)


class FolderService:
    def __init__(self, provider: StorageProvider, root_id: str, hop_limit: int = DEFAULT_HOP_LIMIT) -> None:
        self.provider = provider
        self.root_id = root_id
        self.hop_limit = hop_limit

    def create_folder(self, name: str, parent_id: str = None) -> dict:
        try:
            folder = self.provider.create_folder(parent_id or self.root_id, name)
        except Exception as e:
            logger.exception('Failed to create folder %r', name)
            return {'success': False, 'error': str(e)}

        logger.info('Created folder %s (%s)', folder.name, folder.id)
        return {
            'success': True,
            'folder': {
                'id': folder.id,
                'name': folder.name,
                'url': folder.url,
                'hasSubfolders': False
            }
        }

    def rename_folder(self, folder_id: str, new_name: str) -> dict:
        try:
            self.provider.rename_folder(folder_id, new_name)
        except Exception as e:
            logger.exception('Failed to rename folder %s', folder_id)
            return {'success': False, 'error': str(e)}

        return {'success': True, 'message': f'Folder renamed to "{new_name}"'}

    def move_folder(self, source_id: str, target_id: str) -> dict:
        """Detach a folder from all its parents and put it under ``target_id``"""
        if not source_id or not target_id:
            return {'success': False, 'error': 'Invalid folder IDs'}

        if source_id == target_id:
            return {'success': False, 'error': 'Cannot move folder into itself'}

        if is_descendant_of(self.provider, target_id, source_id, self.hop_limit):
            return {'success': False, 'error': 'Cannot move folder into its subfolder'}

        try:
            self.provider.get_folder(source_id)
            target = self.provider.get_folder(target_id)

            for parent in self.provider.get_parents(source_id):
                self.provider.remove_parent(source_id, parent.id)
            self.provider.add_parent(source_id, target.id)
        except Exception as e:
            logger.exception('Failed to move folder %s to %s', source_id, target_id)
            return {'success': False, 'error': str(e)}

        logger.info('Moved folder %s to %s', source_id, target.id)
        return {'success': True, 'message': f'Moved to "{target.name}"'}
