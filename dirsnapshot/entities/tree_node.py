"""
Nested directory tree node.
"""

import os
from typing import Any, Union


class TreeNode(dict):
    """
    One directory level of a snapshot tree.

    Subdirectories are keyed by ``separator + name`` and map to their own
    ``TreeNode``. Files are unkeyed leaves: they are stored under
    auto-incrementing integer keys, in the order they were added.
    """

    def __init__(self, sep: str = os.sep):
        super().__init__()
        self.sep = sep
        self._next_leaf = 0

    def add_file(self, name: str) -> None:
        self[self._next_leaf] = name
        self._next_leaf += 1

    def add_directory(self, name: str, node: "TreeNode") -> None:
        self[self.sep + name] = node

    @property
    def files(self) -> list[str]:
        """Leaf names in insertion order."""
        return [value for key, value in self.items() if isinstance(key, int)]

    @property
    def directories(self) -> dict[str, "TreeNode"]:
        """Subtrees keyed by bare directory name."""
        return {
            key[len(self.sep) :]: value
            for key, value in self.items()
            if isinstance(key, str)
        }

    def to_dict(self) -> dict[Union[int, str], Any]:
        return {
            key: value.to_dict() if isinstance(value, TreeNode) else value
            for key, value in self.items()
        }
