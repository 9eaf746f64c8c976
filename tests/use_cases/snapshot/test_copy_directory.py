"""
Tests for the CopyDirectoryUseCase.
"""

import os
from unittest.mock import MagicMock

import pytest

from dirsnapshot.adapters.filesystem.local_fs_adapter import LocalFileSystemAdapter
from dirsnapshot.exceptions import FileRepositoryError, UnreadableError
from dirsnapshot.ports.filesystem.filesystem_port import FileSystemPort
from dirsnapshot.use_cases.snapshot.copy_directory import CopyDirectoryUseCase
from dirsnapshot.use_cases.snapshot.create_snapshot import CreateSnapshotUseCase


def listing(root):
    found = set()
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            found.add(os.path.relpath(os.path.join(dirpath, name), root))
    return found


class TestCopyDirectoryUseCase:
    """Test cases for the CopyDirectoryUseCase."""

    def test_full_copy_nests_under_folder_name(
        self, temp_directory, tmp_path, mock_logger
    ):
        """Test that a full copy recreates the root folder at the destination."""
        use_case = CopyDirectoryUseCase(LocalFileSystemAdapter(), logger=mock_logger)
        target = use_case.execute(temp_directory, str(tmp_path))

        folder = os.path.basename(temp_directory)
        assert target == os.path.join(str(tmp_path), folder)
        assert listing(target) == listing(temp_directory)
        with open(os.path.join(target, "sub", "c.txt")) as f:
            assert f.read().startswith("# Test Markdown")
        mock_logger.info.assert_any_call("Copied 3 files")

    def test_contents_only_copy(self, temp_directory, tmp_path, mock_logger):
        """Test copying the contents straight into the destination."""
        use_case = CopyDirectoryUseCase(LocalFileSystemAdapter(), logger=mock_logger)
        target = use_case.execute(temp_directory, str(tmp_path), full=False)

        assert target == str(tmp_path)
        assert listing(str(tmp_path)) == {"a.txt", "b.txt", "sub", os.path.join("sub", "c.txt")}

    def test_directories_created_before_their_files(self, mock_logger):
        """Test the pre-order sequence of file system calls."""
        layout = {"/src": ["sub", "a.txt"], "/src/sub": ["c.txt"]}
        filesystem = MagicMock(spec=FileSystemPort)
        filesystem.list_dir.side_effect = lambda path: layout[path]
        filesystem.is_dir.side_effect = lambda path: path in layout
        filesystem.is_link.return_value = False
        filesystem.exists.return_value = False

        use_case = CopyDirectoryUseCase(filesystem, sep="/", logger=mock_logger)
        assert use_case.execute("/src", "/dst") == "/dst/src"

        calls = [
            (name, args)
            for name, args, _ in filesystem.mock_calls
            if name in ("make_dir", "copy_file")
        ]
        assert calls == [
            ("make_dir", ("/dst/src",)),
            ("make_dir", ("/dst/src/sub",)),
            ("copy_file", ("/src/sub/c.txt", "/dst/src/sub/c.txt")),
            ("copy_file", ("/src/a.txt", "/dst/src/a.txt")),
        ]

    def test_unreadable_source(self, mock_logger):
        """Test that an unreadable source is reported unchanged."""
        filesystem = MagicMock(spec=FileSystemPort)
        filesystem.exists.return_value = True
        filesystem.list_dir.side_effect = UnreadableError("denied", "/src")
        use_case = CopyDirectoryUseCase(filesystem, sep="/", logger=mock_logger)

        with pytest.raises(UnreadableError, match="denied"):
            use_case.execute("/src", "/dst")

    def test_unexpected_error_wrapped(self, mock_logger):
        """Test that unexpected exceptions are wrapped."""
        filesystem = MagicMock(spec=FileSystemPort)
        filesystem.exists.side_effect = RuntimeError("boom")
        use_case = CopyDirectoryUseCase(filesystem, sep="/", logger=mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to copy /src to /dst/src: boom"):
            use_case.execute("/src", "/dst")
        mock_logger.error.assert_called_once_with("Error copying directory: boom")

    def test_snapshot_copy_to(self, temp_directory, tmp_path):
        """Test copying through the snapshot itself."""
        snapshot = CreateSnapshotUseCase(LocalFileSystemAdapter()).execute(temp_directory)
        target = snapshot.copy_to(str(tmp_path))

        assert listing(target) == listing(temp_directory)
