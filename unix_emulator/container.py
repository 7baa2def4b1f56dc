"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from unix_emulator.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from unix_emulator.adapters.files.memory_fs_adapter import InMemoryFileSystemAdapter
from unix_emulator.config.settings import Settings, settings as default_settings
from unix_emulator.ports.display_port import DisplayPort
from unix_emulator.ports.filesystem_port import FileSystemPort
from unix_emulator.use_cases.commands.registry import CommandRegistry
from unix_emulator.use_cases.session.session_loop import SessionLoop


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._use_memory_fs = False
        self._logger = logging.getLogger(__name__)

    def configure(
        self,
        use_memory_fs: bool = False,
        sandbox_root: Optional[str] = None,
        start_directory: Optional[str] = None,
    ) -> None:
        """
        Apply command-line overrides on top of the environment settings.

        Must be called before the file system is first requested.
        """
        settings = self.get_settings()
        self._use_memory_fs = use_memory_fs
        if sandbox_root:
            settings.sandbox_root = sandbox_root
        if start_directory:
            settings.start_directory = start_directory
        self._instances.pop("file_system", None)

    def get_settings(self) -> Settings:
        """
        Get application settings.

        Returns:
            Settings read from the environment
        """
        if self._settings is None:
            self._settings = default_settings
        return self._settings

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            if self._use_memory_fs:
                self._instances["file_system"] = InMemoryFileSystemAdapter(
                    logger=self._logger
                )
            else:
                settings = self.get_settings()
                self._instances["file_system"] = LocalFileSystemAdapter(
                    start_directory=settings.start_directory,
                    sandbox_root=settings.sandbox_root,
                    logger=self._logger,
                )
        return self._instances["file_system"]

    def get_command_registry(self) -> CommandRegistry:
        """
        Get the command registry with injected dependencies.

        Returns:
            Configured CommandRegistry
        """
        if "command_registry" not in self._instances:
            self._instances["command_registry"] = CommandRegistry(
                self.get_file_system(),
                body_terminator=self.get_settings().body_terminator,
                logger=self._logger,
            )
        return self._instances["command_registry"]

    def create_session_loop(self, display: Optional[DisplayPort] = None) -> SessionLoop:
        """
        Build a new session bound to a display.

        Returns:
            SessionLoop sharing the container's registry and file system
        """
        return SessionLoop(
            self.get_command_registry(),
            self.get_file_system(),
            display=display,
            max_visible_lines=self.get_settings().max_visible_lines,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
