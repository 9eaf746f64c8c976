"""
Use case for taking a directory snapshot.
"""

import logging
import os
from typing import Optional

from dirsnapshot.entities.directory_snapshot import DirectorySnapshot
from dirsnapshot.entities.snapshot_options import SnapshotOptions
from dirsnapshot.exceptions import BaseAppError, FileRepositoryError
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.use_cases.snapshot.path_normalizer import PathNormalizer
from dirsnapshot.use_cases.snapshot.traverser import Traverser
from dirsnapshot.use_cases.snapshot.tree_builder import TreeBuilder


class CreateSnapshotUseCase:
    """Use case for building a DirectorySnapshot from a path and options."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        logger: Optional[logging.Logger] = None,
        sep: str = os.sep,
    ):
        """
        Initialize the use case.

        Args:
            filesystem: File system access
            logger: Logger instance to use for logging
            sep: Path separator
        """
        self._filesystem = filesystem
        self._logger = logger or logging.getLogger(__name__)
        self._sep = sep
        self._normalizer = PathNormalizer(filesystem, sep)
        self._tree_builder = TreeBuilder(filesystem, sep)
        self._traverser = Traverser(filesystem, sep, self._logger)

    def execute(
        self, directory: str, options: Optional[SnapshotOptions] = None
    ) -> DirectorySnapshot:
        """
        Snapshot a directory.

        The path is normalized, the tree is built once and the traversal
        runs once; nothing is recomputed afterwards.

        Args:
            directory: Path of the directory to snapshot
            options: Traversal flags (defaults to flat, name-only)

        Returns:
            The DirectorySnapshot

        Raises:
            NotFoundError: If the directory does not exist
            FileRepositoryError: If the directory cannot be walked
        """
        options = options or SnapshotOptions()
        try:
            self._logger.info(f"Taking snapshot of directory: {directory}")
            path = self._normalizer.normalize(directory)
            root = self._filesystem.real_path(path)
            tree = {root: self._tree_builder.build(path)}
            entries = self._traverser.traverse(path, options)
            self._logger.info(f"Snapshot holds {len(entries)} entries")
            return DirectorySnapshot(
                path,
                entries,
                tree,
                options,
                self._filesystem,
                factory=self.execute,
                sep=self._sep,
                logger=self._logger,
            )
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error taking snapshot: {e}")
            raise FileRepositoryError(
                f"Failed to take snapshot of {directory}: {str(e)}"
            )
