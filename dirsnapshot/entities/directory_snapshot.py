"""
Directory snapshot domain entity.
"""

import copy
import logging
import os
from typing import Any, Callable, Iterator, NamedTuple, Optional

from dirsnapshot.entities.snapshot_options import SnapshotOptions
from dirsnapshot.entities.tree_node import TreeNode
from dirsnapshot.exceptions import (
    ConfigurationError,
    IsDirectoryError,
    NotFoundError,
    ReadOnlyError,
    ReadOnlyFileError,
)
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.use_cases.snapshot.copy_directory import CopyDirectoryUseCase
from dirsnapshot.use_cases.snapshot.empty_directory import EmptyDirectoryUseCase
from dirsnapshot.utils.walk import join


class SnapshotEntry(NamedTuple):
    """A rendered entry plus the on-disk path it was rendered from."""

    value: str
    source: str


SnapshotFactory = Callable[[str, SnapshotOptions], "DirectorySnapshot"]


class DirectorySnapshot:
    """
    Point-in-time, read-only view of a directory's contents.

    Entries live in numbered slots assigned in traversal order. Deleting an
    entry frees its slot without renumbering the others, and the slot is
    never handed out again. The tree and the options never change after
    construction; use the ``with_*`` builders to get a snapshot taken with
    different flags.
    """

    def __init__(
        self,
        path: str,
        entries: list[SnapshotEntry],
        tree: dict[str, TreeNode],
        options: SnapshotOptions,
        filesystem: FileSystemPort,
        factory: Optional[SnapshotFactory] = None,
        sep: str = os.sep,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the snapshot from already computed state.

        Args:
            path: Normalized root path
            entries: Traversal result, in order
            tree: Single-key mapping from the resolved root to its TreeNode
            options: Flags the traversal ran with
            filesystem: File system used for deletion, copy and empty
            factory: Callable building a fresh snapshot for the ``with_*`` builders
            sep: Path separator
            logger: Logger instance to use for logging
        """
        self._path = path
        self._entries: dict[int, SnapshotEntry] = dict(enumerate(entries))
        self._tree = tree
        self._options = options
        self._filesystem = filesystem
        self._factory = factory
        self._sep = sep
        self._logger = logger or logging.getLogger(__name__)

    # ----------------------------- properties -----------------------------
    @property
    def path(self) -> str:
        return self._path

    @property
    def options(self) -> SnapshotOptions:
        return self._options

    @property
    def tree(self) -> dict[str, TreeNode]:
        """A copy of the snapshot tree; changing it leaves the snapshot intact."""
        return copy.deepcopy(self._tree)

    @property
    def files(self) -> list[str]:
        return [entry.value for entry in self._entries.values()]

    @property
    def is_absolute(self) -> bool:
        return self._options.absolute

    @property
    def is_relative(self) -> bool:
        return self._options.relative

    @property
    def is_recursive(self) -> bool:
        return self._options.recursive

    @property
    def is_files_only(self) -> bool:
        return self._options.files_only

    def get_path(self) -> str:
        return self._path

    def get_files(self) -> list[str]:
        return self.files

    def get_tree(self) -> dict[str, TreeNode]:
        return self.tree

    def items(self) -> list[tuple[int, str]]:
        """(slot, value) pairs in stored order."""
        return [(index, entry.value) for index, entry in self._entries.items()]

    # ----------------------------- collection -----------------------------
    def __len__(self) -> int:
        return len(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.files)

    def __contains__(self, name: object) -> bool:
        return self.index_of(name) is not None  # type: ignore[arg-type]

    def __getitem__(self, index: int) -> str:
        if index not in self._entries:
            raise IndexError(f"No entry at index {index}")
        return self._entries[index].value

    def __setitem__(self, index: int, value: str) -> None:
        raise ReadOnlyError("The directory snapshot is read-only")

    def __delitem__(self, index: int) -> None:
        raise ReadOnlyError(
            "The directory snapshot is read-only; use delete_entry() to remove a file"
        )

    def index_of(self, name: str) -> Optional[int]:
        """Return the first slot holding ``name``, or None."""
        for index, entry in self._entries.items():
            if entry.value == name:
                return index
        return None

    def get(self, index: int) -> Optional[str]:
        entry = self._entries.get(index)
        return entry.value if entry is not None else None

    def get_by_name(self, name: str) -> Optional[str]:
        index = self.index_of(name)
        return self.get(index) if index is not None else None

    def exists(self, index: int) -> bool:
        return index in self._entries

    def exists_by_name(self, name: str) -> bool:
        return self.index_of(name) is not None

    # ------------------------------ deletion ------------------------------
    def delete_entry(self, index: int) -> None:
        """
        Delete the file behind an entry from disk, then drop the entry.

        Args:
            index: Slot of the entry to delete

        Raises:
            NotFoundError: If there is no such entry, or the file is already gone
            IsDirectoryError: If the entry is a directory
            ReadOnlyFileError: If the file is not writable
        """
        entry = self._entries.get(index)
        if entry is None:
            raise NotFoundError(f"No entry at index {index}")

        target = self._target_path(entry)
        if self._filesystem.is_dir(target):
            raise IsDirectoryError(f"Cannot delete a directory: {target}", target)
        if not self._filesystem.exists(target):
            raise NotFoundError(f"File does not exist: {target}", target)
        if not self._filesystem.is_writable(target):
            raise ReadOnlyFileError(f"File is not writable: {target}", target)

        self._filesystem.delete_file(target)
        del self._entries[index]
        self._logger.info(f"Deleted {target} (entry {index})")

    def delete_entry_by_name(self, name: str) -> None:
        index = self.index_of(name)
        if index is None:
            raise NotFoundError(f"No entry named {name}", name)
        self.delete_entry(index)

    def _target_path(self, entry: SnapshotEntry) -> str:
        # Absolute values are resolved and may point outside the root;
        # bare names from a recursive walk do not locate nested files.
        if self._options.absolute or (
            self._options.recursive and not self._options.relative
        ):
            return entry.source
        return join(self._path, entry.value, self._sep)

    # ------------------------------ builders ------------------------------
    def with_options(self, options: SnapshotOptions) -> "DirectorySnapshot":
        """Take a new snapshot of the same root with different flags."""
        if self._factory is None:
            raise ConfigurationError("This snapshot was built without a snapshot factory")
        return self._factory(self._path, options)

    def with_absolute(self, absolute: bool) -> "DirectorySnapshot":
        return self.with_options(self._options.with_absolute(absolute))

    def with_relative(self, relative: bool) -> "DirectorySnapshot":
        return self.with_options(self._options.with_relative(relative))

    def with_recursive(self, recursive: bool) -> "DirectorySnapshot":
        return self.with_options(self._options.with_recursive(recursive))

    def with_files_only(self, files_only: bool) -> "DirectorySnapshot":
        return self.with_options(self._options.with_files_only(files_only))

    # --------------------------- tree operations --------------------------
    def copy_to(self, destination: str, full: bool = True) -> str:
        """
        Recursively copy the snapshot root to ``destination``.

        Args:
            destination: Target directory
            full: Nest the copy under the root's own folder name

        Returns:
            The directory the contents were copied into
        """
        return CopyDirectoryUseCase(
            self._filesystem, sep=self._sep, logger=self._logger
        ).execute(self._path, destination, full)

    def empty_dir(self, remove: bool = False, path: Optional[str] = None) -> None:
        """
        Recursively delete everything under ``path`` (the snapshot root by default).

        The snapshot itself is not refreshed.
        """
        EmptyDirectoryUseCase(
            self._filesystem, sep=self._sep, logger=self._logger
        ).execute(path if path is not None else self._path, remove)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self._path,
            "options": self._options.to_dict(),
            "count": len(self),
            "entries": self.items(),
            "tree": {root: node.to_dict() for root, node in self._tree.items()},
        }

    def __repr__(self) -> str:
        return f"DirectorySnapshot(path='{self._path}', count={len(self)})"
