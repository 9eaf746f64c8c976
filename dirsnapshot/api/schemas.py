"""
Pydantic models for API requests and responses.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from dirsnapshot.entities.snapshot_options import PathMode, SnapshotOptions


class SnapshotOptionsSchema(BaseModel):
    """Schema for snapshot traversal flags."""

    path_mode: PathMode = Field(
        PathMode.NAME, description="Entry rendering: name, relative or absolute"
    )
    recursive: bool = Field(False, description="Whether to walk the whole subtree")
    files_only: bool = Field(False, description="Whether to leave directories out")

    def to_options(self) -> SnapshotOptions:
        return SnapshotOptions.from_path_mode(
            self.path_mode, recursive=self.recursive, files_only=self.files_only
        )

    @classmethod
    def from_options(cls, options: SnapshotOptions):
        return cls(
            path_mode=options.path_mode,
            recursive=options.recursive,
            files_only=options.files_only,
        )


class EntryInfo(BaseModel):
    """Schema for one snapshot entry."""

    index: int = Field(..., description="Slot of the entry in the snapshot")
    value: str = Field(..., description="Rendered entry path")


class SnapshotResponse(BaseModel):
    """Schema for a directory snapshot."""

    path: str = Field(..., description="Normalized snapshot root")
    options: SnapshotOptionsSchema = Field(..., description="Flags used for traversal")
    count: int = Field(..., description="Number of entries")
    entries: List[EntryInfo] = Field(..., description="Entries in traversal order")

    @classmethod
    def from_entity(cls, snapshot):
        """Create a SnapshotResponse schema from a DirectorySnapshot entity."""
        return cls(
            path=snapshot.path,
            options=SnapshotOptionsSchema.from_options(snapshot.options),
            count=len(snapshot),
            entries=[EntryInfo(index=i, value=v) for i, v in snapshot.items()],
        )


class TreeResponse(BaseModel):
    """Schema for a directory tree."""

    path: str = Field(..., description="Normalized snapshot root")
    tree: Dict[str, Any] = Field(
        ..., description="Nested map keyed by the resolved root path"
    )

    @classmethod
    def from_entity(cls, snapshot):
        """Create a TreeResponse schema from a DirectorySnapshot entity."""
        return cls(
            path=snapshot.path,
            tree={root: _json_keys(node) for root, node in snapshot.tree.items()},
        )


def _json_keys(node: Dict[Any, Any]) -> Dict[str, Any]:
    return {
        str(key): _json_keys(value) if isinstance(value, dict) else value
        for key, value in node.items()
    }


class DeleteEntryRequest(BaseModel):
    """Schema for deleting one file tracked by a snapshot."""

    directory: str = Field(..., description="Snapshot root")
    name: Optional[str] = Field(None, description="Entry value to delete")
    index: Optional[int] = Field(None, description="Entry slot to delete")
    options: SnapshotOptionsSchema = Field(
        default_factory=SnapshotOptionsSchema,
        description="Flags used to take the snapshot",
    )


class CopyDirectoryRequest(BaseModel):
    """Schema for copying a directory."""

    directory: str = Field(..., description="Directory to copy")
    destination: str = Field(..., description="Directory to copy into")
    full: bool = Field(True, description="Nest the copy under the source folder name")


class EmptyDirectoryRequest(BaseModel):
    """Schema for emptying a directory."""

    directory: str = Field(..., description="Directory to empty")
    remove: bool = Field(False, description="Also remove the directory itself")


class OperationResponse(BaseModel):
    """Schema for a completed file system operation."""

    path: str = Field(..., description="Path the operation ended on")
    detail: str = Field(..., description="Human readable summary")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
