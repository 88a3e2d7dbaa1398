"""
Upward walks over folder parent links.

The hierarchy lives in an external store and may contain cycles, so every
walk is bounded by a hop limit.
"""
import logging
from app.storage.base import StorageProvider

logger = logging.getLogger(__name__)

DEFAULT_HOP_LIMIT = 20


def is_descendant_of(provider: StorageProvider, candidate_id: str, ancestor_id: str,
                     hop_limit: int = DEFAULT_HOP_LIMIT) -> bool:
    """
    Check whether ``ancestor_id`` appears on the first-parent chain of
    ``candidate_id``.

    Returns False when the chain ends, when ``hop_limit`` parents have been
    visited without a match, or when a lookup fails.
    """
    try:
        current = provider.get_folder(candidate_id)
        for _ in range(hop_limit):
            parents = provider.get_parents(current.id)
            if not parents:
                return False

            parent = parents[0]
            if parent.id == ancestor_id:
                return True
            current = parent
    except Exception as e:
        logger.warning('Ancestor check %s -> %s failed: %s', candidate_id, ancestor_id, e)
        return False

    return False


class FolderPathResolver:
    def __init__(self, provider: StorageProvider, root_id: str, hop_limit: int = DEFAULT_HOP_LIMIT) -> None:
        self.provider = provider
        self.root_id = root_id
        self.hop_limit = hop_limit

    def resolve(self, folder_id: str) -> list[dict]:
        """
        Build the breadcrumb from the root folder down to ``folder_id``.

        The root is always the first element, even when the walk stopped
        before reaching it (folder outside the root tree, or deeper than the
        hop limit). Any failure gives an empty path.
        """
        path = []
        try:
            current = self.provider.get_folder(folder_id)
            hops = 0
            while current.id != self.root_id and hops < self.hop_limit:
                path.insert(0, {'id': current.id, 'name': current.name})

                parents = self.provider.get_parents(current.id)
                if not parents:
                    break
                current = parents[0]
                hops += 1

            root = self.provider.get_folder(self.root_id)
            path.insert(0, {'id': root.id, 'name': root.name})
        except Exception as e:
            logger.warning('Could not resolve path of folder %s: %s', folder_id, e)
            return []

        return path
