"""
Local file system adapter implementation for file system access.
"""

import logging
import os
import shutil

from typing_extensions import override

from dirsnapshot.exceptions import (
    FileRepositoryError,
    NotFoundError,
    UnreadableError,
)
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    @override
    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    @override
    def list_dir(self, path: str) -> list[str]:
        """
        List the entry names of a directory, unsorted.

        Args:
            path: Directory to list

        Returns:
            Entry names in the order the operating system yields them

        Raises:
            UnreadableError: If the directory cannot be opened
        """
        try:
            return os.listdir(path)
        except OSError as e:
            raise UnreadableError(f"Cannot open directory {path}: {e}", path)

    @override
    def real_path(self, path: str) -> str:
        """
        Resolve a path strictly; the path and every link along it must exist.

        Args:
            path: Path to resolve

        Returns:
            Canonical absolute path

        Raises:
            NotFoundError: If the path cannot be resolved
        """
        try:
            return os.path.realpath(path, strict=True)
        except OSError as e:
            raise NotFoundError(f"Cannot resolve path {path}: {e}", path)

    @override
    def make_dir(self, path: str, exist_ok: bool = True) -> None:
        try:
            os.makedirs(path, exist_ok=exist_ok)
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")

    @override
    def copy_file(self, source: str, destination: str) -> None:
        try:
            shutil.copy2(source, destination)
        except OSError as e:
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.unlink(path)
            self._logger.debug(f"Deleted file: {path}")
        except FileNotFoundError:
            raise NotFoundError(f"File does not exist: {path}", path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete file {path}: {str(e)}")

    @override
    def remove_dir(self, path: str) -> None:
        try:
            os.rmdir(path)
            self._logger.debug(f"Removed directory: {path}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to remove directory {path}: {str(e)}")
