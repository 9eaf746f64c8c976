"""
Normalization of a snapshot root path.
"""

import os

from dirsnapshot.exceptions import NotFoundError
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort


class PathNormalizer:
    """Rewrites foreign separators, checks existence and trims one trailing separator."""

    def __init__(self, filesystem: FileSystemPort, sep: str = os.sep):
        self._filesystem = filesystem
        self._sep = sep
        self._foreign_sep = "\\" if sep == "/" else "/"

    def normalize(self, path: str) -> str:
        """
        Normalize a caller-supplied directory path.

        Args:
            path: Directory path, possibly using the other platform's separator

        Returns:
            The path with native separators and no trailing separator

        Raises:
            NotFoundError: If the path does not exist
        """
        if self._foreign_sep in path:
            path = path.replace(self._foreign_sep, self._sep)

        if not self._filesystem.exists(path):
            raise NotFoundError(f"The directory does not exist: {path}", path)

        # A bare root ("/") keeps its only separator.
        if len(path) > 1 and path.endswith(self._sep):
            path = path[: -len(self._sep)]
        return path
