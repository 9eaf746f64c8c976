"""
Dependency injection container for managing application dependencies.
"""

import logging

from dirsnapshot.adapters.filesystem.local_fs_adapter import LocalFileSystemAdapter
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.use_cases.snapshot.copy_directory import CopyDirectoryUseCase
from dirsnapshot.use_cases.snapshot.create_snapshot import CreateSnapshotUseCase
from dirsnapshot.use_cases.snapshot.empty_directory import EmptyDirectoryUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_filesystem(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "filesystem" not in self._instances:
            self._instances["filesystem"] = LocalFileSystemAdapter(self._logger)
        return self._instances["filesystem"]

    def get_create_snapshot_use_case(self) -> CreateSnapshotUseCase:
        """
        Get create snapshot use case with injected dependencies.

        Returns:
            Configured CreateSnapshotUseCase
        """
        if "create_snapshot_use_case" not in self._instances:
            filesystem = self.get_filesystem()
            self._instances["create_snapshot_use_case"] = CreateSnapshotUseCase(
                filesystem, self._logger
            )
        return self._instances["create_snapshot_use_case"]

    def get_copy_directory_use_case(self) -> CopyDirectoryUseCase:
        """
        Get copy directory use case with injected dependencies.

        Returns:
            Configured CopyDirectoryUseCase
        """
        if "copy_directory_use_case" not in self._instances:
            filesystem = self.get_filesystem()
            self._instances["copy_directory_use_case"] = CopyDirectoryUseCase(
                filesystem, logger=self._logger
            )
        return self._instances["copy_directory_use_case"]

    def get_empty_directory_use_case(self) -> EmptyDirectoryUseCase:
        """
        Get empty directory use case with injected dependencies.

        Returns:
            Configured EmptyDirectoryUseCase
        """
        if "empty_directory_use_case" not in self._instances:
            filesystem = self.get_filesystem()
            self._instances["empty_directory_use_case"] = EmptyDirectoryUseCase(
                filesystem, logger=self._logger
            )
        return self._instances["empty_directory_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
