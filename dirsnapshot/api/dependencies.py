"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from dirsnapshot.container import container
from dirsnapshot.use_cases.snapshot.copy_directory import CopyDirectoryUseCase
from dirsnapshot.use_cases.snapshot.create_snapshot import CreateSnapshotUseCase
from dirsnapshot.use_cases.snapshot.empty_directory import EmptyDirectoryUseCase


def get_create_snapshot_uc() -> CreateSnapshotUseCase:
    """
    Get the create snapshot use case from the container.

    Returns:
        CreateSnapshotUseCase: The create snapshot use case instance
    """
    return container.get_create_snapshot_use_case()


def get_copy_directory_uc() -> CopyDirectoryUseCase:
    """
    Get the copy directory use case from the container.

    Returns:
        CopyDirectoryUseCase: The copy directory use case instance
    """
    return container.get_copy_directory_use_case()


def get_empty_directory_uc() -> EmptyDirectoryUseCase:
    """
    Get the empty directory use case from the container.

    Returns:
        EmptyDirectoryUseCase: The empty directory use case instance
    """
    return container.get_empty_directory_use_case()
