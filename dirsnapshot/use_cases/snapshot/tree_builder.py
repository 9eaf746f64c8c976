"""
Construction of the nested directory tree.
"""

import os

from dirsnapshot.entities.tree_node import TreeNode
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.utils.walk import join


class TreeBuilder:
    """Builds a TreeNode hierarchy mirroring a directory on disk."""

    def __init__(self, filesystem: FileSystemPort, sep: str = os.sep):
        self._filesystem = filesystem
        self._sep = sep

    def build(self, path: str) -> TreeNode:
        """
        Recursively build the tree below ``path``, depth-first and pre-order.

        Children keep the order the file system lists them in. Symlinked
        directories are followed like any other directory.

        Args:
            path: Directory to build the tree for

        Returns:
            The TreeNode for ``path``
        """
        node = TreeNode(self._sep)
        for name in self._filesystem.list_dir(path):
            child = join(path, name, self._sep)
            if self._filesystem.is_dir(child):
                node.add_directory(name, self.build(child))
            else:
                node.add_file(name)
        return node
