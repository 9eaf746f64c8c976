"""
Traversal of a snapshot root into its ordered, rendered entries.
"""

import logging
import os
from typing import Iterable, Optional

from dirsnapshot.entities.directory_snapshot import SnapshotEntry
from dirsnapshot.entities.snapshot_options import SnapshotOptions
from dirsnapshot.exceptions import NotFoundError
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.utils.walk import WalkItem, iter_pre_order, join


class Traverser:
    """Walks a directory flat or recursively and renders each entry per the path mode."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        sep: str = os.sep,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the traverser.

        Args:
            filesystem: File system access
            sep: Path separator used to join and render paths
            logger: Logger instance to use for logging
        """
        self._filesystem = filesystem
        self._sep = sep
        self._logger = logger or logging.getLogger(__name__)

    def traverse(self, root: str, options: SnapshotOptions) -> list[SnapshotEntry]:
        """
        Produce the ordered entries of ``root``.

        Flat mode visits the immediate children only. Recursive mode visits
        the whole subtree in pre-order, each directory before its contents.

        Args:
            root: Normalized snapshot root
            options: Traversal flags

        Returns:
            Entries in traversal order

        Raises:
            UnreadableError: If a directory along the walk cannot be listed
        """
        root_prefix = None
        if options.absolute or options.relative:
            root_prefix = self._filesystem.real_path(root)
            if not root_prefix.endswith(self._sep):
                root_prefix += self._sep

        if options.recursive:
            items: Iterable[WalkItem] = iter_pre_order(self._filesystem, root, self._sep)
        else:
            items = self._iter_flat(root)

        entries: list[SnapshotEntry] = []
        for item in items:
            if options.files_only and item.is_dir:
                continue
            value = self._render(item, options, root_prefix)
            if value is not None:
                entries.append(SnapshotEntry(value, item.path))
        return entries

    def _iter_flat(self, root: str) -> Iterable[WalkItem]:
        for name in self._filesystem.list_dir(root):
            path = join(root, name, self._sep)
            yield WalkItem(name, path, name, self._filesystem.is_dir(path))

    def _render(
        self,
        item: WalkItem,
        options: SnapshotOptions,
        root_prefix: Optional[str],
    ) -> Optional[str]:
        if options.absolute or options.relative:
            try:
                resolved = self._filesystem.real_path(item.path)
            except NotFoundError:
                self._logger.debug(f"Skipping unresolvable entry: {item.path}")
                return None
            if options.absolute:
                return resolved
            if root_prefix and resolved.startswith(root_prefix):
                return resolved[len(root_prefix) :]
            # Symlink target outside the root
            return item.sub_path

        if item.is_dir and not options.recursive and not options.files_only:
            return item.name + self._sep
        return item.name
