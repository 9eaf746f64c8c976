"""
Use case for recursively copying a directory.
"""

import logging
import os
from typing import Optional

from dirsnapshot.exceptions import FileRepositoryError
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.utils.walk import iter_pre_order, join


class CopyDirectoryUseCase:
    """Use case for copying a directory tree to another location."""

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

    def execute(self, source: str, destination: str, full: bool = True) -> str:
        """
        Copy ``source`` into ``destination``, parents before children.

        Args:
            source: Directory to copy
            destination: Directory to copy into
            full: If True, nest the copy under the source's own folder name

        Returns:
            The directory the contents were copied into

        Raises:
            FileRepositoryError: If copying fails
        """
        try:
            if full:
                folder = source.rsplit(self._sep, 1)[-1]
                destination = join(destination, folder, self._sep)
                if not self._filesystem.exists(destination):
                    self._filesystem.make_dir(destination)

            self._logger.info(f"Copying {source} to {destination}")
            copied = 0
            for item in iter_pre_order(self._filesystem, source, self._sep):
                target = join(destination, item.sub_path, self._sep)
                if item.is_dir:
                    self._filesystem.make_dir(target)
                else:
                    self._filesystem.copy_file(item.path, target)
                    copied += 1
            self._logger.info(f"Copied {copied} files")
            return destination
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying directory: {e}")
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )
