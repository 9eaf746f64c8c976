"""
Tests for the API router endpoints.
"""

import os
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from dirsnapshot.entities.directory_snapshot import DirectorySnapshot
from dirsnapshot.entities.snapshot_options import SnapshotOptions
from dirsnapshot.entities.tree_node import TreeNode
from dirsnapshot.exceptions import (
    IsDirectoryError,
    NotFoundError,
    ReadOnlyFileError,
    UnreadableError,
)
from dirsnapshot.main import app

client = TestClient(app)


@pytest.fixture
def mock_snapshot():
    """Create a mock snapshot entity for testing."""
    snapshot = MagicMock(spec=DirectorySnapshot)
    snapshot.path = "/test/path"
    snapshot.options = SnapshotOptions(relative=True)
    snapshot.items.return_value = [(0, "a.txt"), (2, "sub")]
    snapshot.__len__.return_value = 2
    node = TreeNode("/")
    node.add_file("a.txt")
    node.add_directory("sub", TreeNode("/"))
    snapshot.tree = {"/real/test/path": node}
    return snapshot


class TestSnapshotAPI:
    """Test cases for the snapshot endpoints."""

    def test_take_snapshot_success(self, mock_snapshot):
        """Test taking a snapshot with explicit flags."""
        with patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = mock_snapshot

            response = client.get(
                "/snapshot?directory=/test/path&path_mode=relative&recursive=true"
            )

            assert response.status_code == 200
            data = response.json()
            assert data["path"] == "/test/path"
            assert data["count"] == 2
            assert data["entries"] == [
                {"index": 0, "value": "a.txt"},
                {"index": 2, "value": "sub"},
            ]
            assert data["options"]["path_mode"] == "relative"

            mock_uc.return_value.execute.assert_called_once_with(
                "/test/path",
                SnapshotOptions(relative=True, recursive=True),
            )

    def test_take_snapshot_uses_configured_defaults(self, mock_snapshot):
        """Test that omitted flags come from the settings."""
        with (
            patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc,
            patch("dirsnapshot.api.routers.settings") as mock_settings,
        ):
            mock_uc.return_value.execute.return_value = mock_snapshot
            mock_settings.default_options.return_value = SnapshotOptions(
                absolute=True, files_only=True
            )

            response = client.get("/snapshot?directory=/test/path")

            assert response.status_code == 200
            mock_uc.return_value.execute.assert_called_once_with(
                "/test/path", SnapshotOptions(absolute=True, files_only=True)
            )

    @pytest.mark.parametrize(
        "error, status",
        [
            (NotFoundError("The directory does not exist: /x", "/x"), 404),
            (UnreadableError("Cannot open directory /x", "/x"), 403),
            (ValueError("bad"), 400),
        ],
    )
    def test_take_snapshot_errors(self, error, status):
        """Test the error mapping of the snapshot endpoint."""
        with patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = error

            response = client.get("/snapshot?directory=/x")

            assert response.status_code == status
            assert response.json()["detail"] == str(error)

    def test_snapshot_tree(self, mock_snapshot):
        """Test the tree endpoint renders leaf keys as strings."""
        with patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = mock_snapshot

            response = client.get("/snapshot/tree?directory=/test/path")

            assert response.status_code == 200
            assert response.json()["tree"] == {
                "/real/test/path": {"0": "a.txt", "/sub": {}}
            }

    def test_snapshot_tree_on_disk(self, temp_directory):
        """Test the tree endpoint against a real directory."""
        response = client.get(f"/snapshot/tree?directory={temp_directory}")

        assert response.status_code == 200
        tree = response.json()["tree"]
        root = os.path.realpath(temp_directory)
        assert list(tree) == [root]
        assert tree[root][os.sep + "sub"] == {"0": "c.txt"}


class TestDeleteEntryAPI:
    """Test cases for the delete endpoint."""

    def test_delete_by_name(self, mock_snapshot):
        """Test deleting an entry by name."""
        with patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = mock_snapshot

            response = client.post(
                "/snapshot/delete",
                json={"directory": "/test/path", "name": "a.txt"},
            )

            assert response.status_code == 200
            mock_snapshot.delete_entry_by_name.assert_called_once_with("a.txt")
            mock_snapshot.delete_entry.assert_not_called()

    def test_delete_by_index(self, mock_snapshot):
        """Test deleting an entry by index with options."""
        with patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = mock_snapshot

            response = client.post(
                "/snapshot/delete",
                json={
                    "directory": "/test/path",
                    "index": 2,
                    "options": {"path_mode": "absolute", "recursive": True},
                },
            )

            assert response.status_code == 200
            mock_uc.return_value.execute.assert_called_once_with(
                "/test/path", SnapshotOptions(absolute=True, recursive=True)
            )
            mock_snapshot.delete_entry.assert_called_once_with(2)

    def test_delete_requires_exactly_one_key(self):
        """Test that name and index are mutually exclusive."""
        response = client.post(
            "/snapshot/delete",
            json={"directory": "/test/path", "name": "a.txt", "index": 0},
        )

        assert response.status_code == 400
        assert "Exactly one" in response.json()["detail"]

    @pytest.mark.parametrize(
        "error, status",
        [
            (IsDirectoryError("Cannot delete a directory: /t/sub", "/t/sub"), 409),
            (ReadOnlyFileError("File is not writable: /t/a", "/t/a"), 403),
            (NotFoundError("No entry named z", "z"), 404),
        ],
    )
    def test_delete_errors(self, mock_snapshot, error, status):
        """Test the error mapping of the delete endpoint."""
        with patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc:
            mock_uc.return_value.execute.return_value = mock_snapshot
            mock_snapshot.delete_entry_by_name.side_effect = error

            response = client.post(
                "/snapshot/delete", json={"directory": "/t", "name": "z"}
            )

            assert response.status_code == status
            assert response.json()["detail"] == str(error)


class TestDirectoryOperationsAPI:
    """Test cases for the copy and empty endpoints."""

    def test_copy_directory(self, mock_snapshot):
        """Test copying a directory."""
        with (
            patch("dirsnapshot.api.routers.get_create_snapshot_uc") as mock_uc,
            patch("dirsnapshot.api.routers.get_copy_directory_uc") as mock_copy,
        ):
            mock_uc.return_value.execute.return_value = mock_snapshot
            mock_copy.return_value.execute.return_value = "/dest/path"

            response = client.post(
                "/directories/copy",
                json={"directory": "/test/path/", "destination": "/dest", "full": True},
            )

            assert response.status_code == 200
            assert response.json() == {
                "path": "/dest/path",
                "detail": "Copied /test/path to /dest/path",
            }
            mock_copy.return_value.execute.assert_called_once_with(
                "/test/path", "/dest", True
            )

    def test_empty_directory(self):
        """Test emptying and removing a directory."""
        with patch("dirsnapshot.api.routers.get_empty_directory_uc") as mock_uc:
            response = client.post(
                "/directories/empty", json={"directory": "/test/path", "remove": True}
            )

            assert response.status_code == 200
            assert response.json()["detail"] == "Removed /test/path"
            mock_uc.return_value.execute.assert_called_once_with("/test/path", True)

    def test_empty_directory_unreadable(self):
        """Test emptying a directory that cannot be opened."""
        with patch("dirsnapshot.api.routers.get_empty_directory_uc") as mock_uc:
            mock_uc.return_value.execute.side_effect = UnreadableError(
                "Cannot open directory /x", "/x"
            )

            response = client.post("/directories/empty", json={"directory": "/x"})

            assert response.status_code == 403
