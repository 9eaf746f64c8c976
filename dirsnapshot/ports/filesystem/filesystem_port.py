"""
File system port interface defining the contract for file system access.
"""

from abc import ABC, abstractmethod


class FileSystemPort(ABC):
    """Port interface for the file system primitives a snapshot is built on."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a path exists.

        Args:
            path: Path to check

        Returns:
            True if the path exists; dangling symlinks do not
        """
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """
        Check whether a path is a directory, following symlinks.

        Args:
            path: Path to check

        Returns:
            True if the path is a directory
        """
        pass

    @abstractmethod
    def is_link(self, path: str) -> bool:
        """
        Check whether a path is a symbolic link.

        Args:
            path: Path to check

        Returns:
            True if the path is a symlink
        """
        pass

    @abstractmethod
    def is_writable(self, path: str) -> bool:
        """
        Check whether the current process may write to a path.

        Args:
            path: Path to check

        Returns:
            True if the path is writable
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """
        List the entry names of a directory, in the order the file system yields them.

        The self and parent pseudo-entries are never returned.

        Args:
            path: Directory to list

        Returns:
            List of entry names

        Raises:
            UnreadableError: If the directory cannot be opened
        """
        pass

    @abstractmethod
    def real_path(self, path: str) -> str:
        """
        Resolve a path to its canonical absolute form.

        Args:
            path: Path to resolve

        Returns:
            The resolved path with symlinks and relative components removed

        Raises:
            NotFoundError: If the path cannot be resolved (e.g. a dangling symlink)
        """
        pass

    @abstractmethod
    def make_dir(self, path: str, exist_ok: bool = True) -> None:
        """
        Create a directory.

        Args:
            path: Directory path to create
            exist_ok: If True, do not raise if the directory already exists
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Copy a single file.

        Args:
            source: File to copy
            destination: Target file path
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a file or symlink.

        Args:
            path: File to delete
        """
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """
        Remove an empty directory.

        Args:
            path: Directory to remove
        """
        pass
