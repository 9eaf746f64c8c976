"""
Snapshot options value object.
"""

from dataclasses import dataclass, replace
from enum import Enum

from dirsnapshot.exceptions import ConfigurationError


class PathMode(str, Enum):
    """How each snapshot entry is rendered."""

    NAME = "name"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class SnapshotOptions:
    """
    Immutable traversal flags for a directory snapshot.

    ``absolute`` and ``relative`` are mutually exclusive; the ``with_*``
    builders clear the other flag when one of them is switched on.
    """

    absolute: bool = False
    relative: bool = False
    recursive: bool = False
    files_only: bool = False

    def __post_init__(self) -> None:
        if self.absolute and self.relative:
            raise ConfigurationError(
                "Options 'absolute' and 'relative' are mutually exclusive"
            )

    @classmethod
    def from_flags(
        cls,
        absolute: bool = False,
        relative: bool = False,
        recursive: bool = False,
        files_only: bool = False,
    ) -> "SnapshotOptions":
        """
        Build options the way a sequence of setters would.

        ``absolute`` is applied before ``relative``, so when both are true the
        relative flag wins.
        """
        return (
            cls()
            .with_absolute(absolute)
            .with_relative(relative)
            .with_recursive(recursive)
            .with_files_only(files_only)
        )

    @classmethod
    def from_path_mode(
        cls,
        mode: PathMode | str,
        recursive: bool = False,
        files_only: bool = False,
    ) -> "SnapshotOptions":
        try:
            mode = PathMode(mode)
        except ValueError:
            raise ConfigurationError(f"Unknown path mode: {mode}")
        return cls(
            absolute=mode is PathMode.ABSOLUTE,
            relative=mode is PathMode.RELATIVE,
            recursive=recursive,
            files_only=files_only,
        )

    @property
    def path_mode(self) -> PathMode:
        if self.absolute:
            return PathMode.ABSOLUTE
        if self.relative:
            return PathMode.RELATIVE
        return PathMode.NAME

    def with_absolute(self, absolute: bool) -> "SnapshotOptions":
        absolute = bool(absolute)
        if absolute:
            return replace(self, absolute=True, relative=False)
        return replace(self, absolute=False)

    def with_relative(self, relative: bool) -> "SnapshotOptions":
        relative = bool(relative)
        if relative:
            return replace(self, absolute=False, relative=True)
        return replace(self, relative=False)

    def with_recursive(self, recursive: bool) -> "SnapshotOptions":
        return replace(self, recursive=bool(recursive))

    def with_files_only(self, files_only: bool) -> "SnapshotOptions":
        return replace(self, files_only=bool(files_only))

    def to_dict(self) -> dict[str, bool]:
        return {
            "absolute": self.absolute,
            "relative": self.relative,
            "recursive": self.recursive,
            "files_only": self.files_only,
        }
