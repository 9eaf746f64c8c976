"""
FastAPI router definitions for the API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from dirsnapshot.api.dependencies import (
    get_copy_directory_uc,
    get_create_snapshot_uc,
    get_empty_directory_uc,
)
from dirsnapshot.api.schemas import (
    CopyDirectoryRequest,
    DeleteEntryRequest,
    EmptyDirectoryRequest,
    ErrorResponse,
    OperationResponse,
    SnapshotResponse,
    TreeResponse,
)
from dirsnapshot.config.settings import settings
from dirsnapshot.entities.snapshot_options import PathMode, SnapshotOptions
from dirsnapshot.exceptions import (
    IsDirectoryError,
    NotFoundError,
    ReadOnlyFileError,
    UnreadableError,
)

router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def _http_error(error: Exception) -> HTTPException:
    """Map a domain error to an HTTP error."""
    if isinstance(error, NotFoundError):
        status = 404
    elif isinstance(error, IsDirectoryError):
        status = 409
    elif isinstance(error, (ReadOnlyFileError, UnreadableError)):
        status = 403
    else:
        status = 400
    return HTTPException(status_code=status, detail=str(error))


@router.get("/snapshot", response_model=SnapshotResponse, responses=_ERROR_RESPONSES)
def take_snapshot(
    directory: str = Query(..., description="Directory to snapshot"),
    path_mode: Optional[PathMode] = Query(
        None, description="Entry rendering: name, relative or absolute"
    ),
    recursive: Optional[bool] = Query(
        None, description="Whether to walk the whole subtree"
    ),
    files_only: Optional[bool] = Query(
        None, description="Whether to leave directories out"
    ),
):
    """
    Take a snapshot of a directory.

    Flags that are not given fall back to the configured defaults.

    Args:
        directory: Path of the directory to snapshot
        path_mode: How entries are rendered
        recursive: Whether to traverse recursively
        files_only: Whether to exclude directories

    Returns:
        SnapshotResponse: The snapshot entries

    Raises:
        HTTPException: If the snapshot cannot be taken
    """
    defaults = settings.default_options()
    try:
        options = SnapshotOptions.from_path_mode(
            path_mode if path_mode is not None else defaults.path_mode,
            recursive=defaults.recursive if recursive is None else recursive,
            files_only=defaults.files_only if files_only is None else files_only,
        )
        snapshot = get_create_snapshot_uc().execute(directory, options)
        return SnapshotResponse.from_entity(snapshot)
    except Exception as e:
        raise _http_error(e)


@router.get("/snapshot/tree", response_model=TreeResponse, responses=_ERROR_RESPONSES)
def snapshot_tree(
    directory: str = Query(..., description="Directory to build the tree for"),
):
    """
    Get the nested tree of a directory.

    Args:
        directory: Path of the directory

    Returns:
        TreeResponse: The tree keyed by the resolved root path

    Raises:
        HTTPException: If the tree cannot be built
    """
    try:
        snapshot = get_create_snapshot_uc().execute(directory)
        return TreeResponse.from_entity(snapshot)
    except Exception as e:
        raise _http_error(e)


@router.post(
    "/snapshot/delete", response_model=SnapshotResponse, responses=_ERROR_RESPONSES
)
def delete_entry(body: DeleteEntryRequest):
    """
    Delete one file tracked by a snapshot, by name or by index.

    Args:
        body: Request body with the snapshot root, flags and the entry to delete

    Returns:
        SnapshotResponse: The snapshot after the deletion

    Raises:
        HTTPException: If the entry cannot be deleted
    """
    if (body.name is None) == (body.index is None):
        raise HTTPException(
            status_code=400, detail="Exactly one of 'name' or 'index' is required"
        )
    try:
        snapshot = get_create_snapshot_uc().execute(
            body.directory, body.options.to_options()
        )
        if body.name is not None:
            snapshot.delete_entry_by_name(body.name)
        else:
            snapshot.delete_entry(body.index)
        return SnapshotResponse.from_entity(snapshot)
    except Exception as e:
        raise _http_error(e)


@router.post(
    "/directories/copy", response_model=OperationResponse, responses=_ERROR_RESPONSES
)
def copy_directory(body: CopyDirectoryRequest):
    """
    Recursively copy a directory.

    Args:
        body: Request body with source, destination and nesting flag

    Returns:
        OperationResponse: Where the contents were copied to

    Raises:
        HTTPException: If copying fails
    """
    try:
        snapshot = get_create_snapshot_uc().execute(body.directory)
        target = get_copy_directory_uc().execute(
            snapshot.path, body.destination, body.full
        )
        return OperationResponse(
            path=target, detail=f"Copied {snapshot.path} to {target}"
        )
    except Exception as e:
        raise _http_error(e)


@router.post(
    "/directories/empty", response_model=OperationResponse, responses=_ERROR_RESPONSES
)
def empty_directory(body: EmptyDirectoryRequest):
    """
    Recursively delete the contents of a directory.

    Args:
        body: Request body with the directory and the remove flag

    Returns:
        OperationResponse: The emptied directory

    Raises:
        HTTPException: If emptying fails
    """
    try:
        get_empty_directory_uc().execute(body.directory, body.remove)
        action = "Removed" if body.remove else "Emptied"
        return OperationResponse(path=body.directory, detail=f"{action} {body.directory}")
    except Exception as e:
        raise _http_error(e)
