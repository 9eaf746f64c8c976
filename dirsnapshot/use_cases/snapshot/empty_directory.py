"""
Use case for recursively emptying a directory.
"""

import logging
import os
from typing import Optional

from dirsnapshot.exceptions import FileRepositoryError
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.utils.walk import join


class EmptyDirectoryUseCase:
    """Use case for deleting everything below a directory."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        sep: str = os.sep,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            filesystem: File system access
            sep: Path separator
            logger: Logger instance to use for logging
        """
        self._filesystem = filesystem
        self._sep = sep
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, remove: bool = False) -> None:
        """
        Delete every entry under ``path``.

        Args:
            path: Directory to empty
            remove: If True, remove ``path`` itself once it is empty

        Raises:
            UnreadableError: If a directory cannot be opened
            FileRepositoryError: If a deletion fails
        """
        try:
            self._logger.info(f"Emptying directory: {path}")
            self._empty(path, remove)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error emptying directory: {e}")
            raise FileRepositoryError(f"Failed to empty {path}: {str(e)}")

    def _empty(self, path: str, remove: bool) -> None:
        for name in self._filesystem.list_dir(path):
            child = join(path, name, self._sep)
            if self._filesystem.is_dir(child) and not self._filesystem.is_link(child):
                self._empty(child, True)
            else:
                self._filesystem.delete_file(child)

        if remove:
            self._filesystem.remove_dir(path)
