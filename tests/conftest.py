"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
import pytest
from unittest.mock import MagicMock

from dirsnapshot.container import DependencyContainer


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing snapshot operations.

    Layout::

        root/
            a.txt
            b.txt
            sub/
                c.txt

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        with open(os.path.join(temp_dir, "a.txt"), "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "b.txt"), "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "sub")
        os.makedirs(subdir)

        with open(os.path.join(subdir, "c.txt"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield temp_dir


@pytest.fixture
def nested_directory(temp_directory):
    """
    Extend temp_directory with a second nesting level.

    Adds ``sub/deep/d.txt`` and an empty ``empty/`` directory.
    """
    deep = os.path.join(temp_directory, "sub", "deep")
    os.makedirs(deep)
    with open(os.path.join(deep, "d.txt"), "w") as f:
        f.write("deep")
    os.makedirs(os.path.join(temp_directory, "empty"))
    return temp_directory


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
