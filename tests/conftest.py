"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from unix_emulator.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from unix_emulator.config.settings import Settings
from unix_emulator.container import DependencyContainer
from unix_emulator.entities.session_state import SessionState
from unix_emulator.ports.display_port import DisplayPort
from unix_emulator.use_cases.commands.registry import CommandRegistry
from unix_emulator.use_cases.session.session_loop import SessionLoop


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        test_file1 = os.path.join(temp_dir, "test1.txt")
        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        os.makedirs(os.path.join(temp_dir, "empty"))

        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def memory_fs(mock_logger):
    """In-memory filesystem starting in /home/user."""
    return InMemoryFileSystemAdapter("/home/user", logger=mock_logger)


@pytest.fixture
def registry(memory_fs, mock_logger):
    return CommandRegistry(memory_fs, body_terminator="EOF", logger=mock_logger)


@pytest.fixture
def state(memory_fs):
    return SessionState(current_directory=memory_fs.get_current_directory())


@pytest.fixture
def mock_display():
    return MagicMock(spec=DisplayPort)


@pytest.fixture
def session(registry, memory_fs, mock_display, mock_logger):
    """Started session over the in-memory filesystem, without banner."""
    loop = SessionLoop(
        registry, memory_fs, display=mock_display, banner=None, logger=mock_logger
    )
    loop.start()
    return loop


@pytest.fixture
def dependency_container(mock_logger, monkeypatch):
    """
    Create a dependency container with default settings for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    for key in list(os.environ):
        if key.startswith("UNIX_EMU_"):
            monkeypatch.delenv(key)
    container = DependencyContainer(Settings())
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
