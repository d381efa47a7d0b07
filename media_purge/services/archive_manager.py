"""Local download archive management."""
import shutil
from pathlib import Path
from typing import List, Union
import logging

from ..base.exceptions import LocalDeleteError

logger = logging.getLogger(__name__)


class ArchiveManager:
    """Lists and removes generation folders under the downloads root."""

    def __init__(self, root: Union[str, Path] = 'downloads'):
        self.root = Path(root)

    def list_entries(self) -> List[str]:
        """Names of the folders directly under the root."""
        if not self.root.exists():
            return []

        try:
            return sorted(item.name for item in self.root.iterdir() if item.is_dir())
        except OSError as e:
            logger.error(f"Error reading {self.root} folder: {e}")
            return []

    def delete_all(self) -> int:
        """Remove every folder under the root, stopping at the first failure.

        Returns the number of folders removed.
        """
        if not self.root.exists():
            logger.info(f"{self.root}/ folder does not exist")
            return 0

        deleted = 0
        folder_path = self.root
        try:
            for folder in self.list_entries():
                folder_path = self.root / folder
                if folder_path.is_symlink():
                    # Drop the link, never the linked directory
                    folder_path.unlink()
                elif folder_path.exists():
                    shutil.rmtree(folder_path)
                logger.info(f"  ✅ Deleted: {folder}")
                deleted += 1
        except OSError as e:
            error = LocalDeleteError(folder_path, e)
            logger.error(f"Error deleting downloads: {error}")

        return deleted
