"""
Filesystem port interface defining the contract for filesystem primitives.
"""

from abc import ABC, abstractmethod


class FileSystemPort(ABC):
    """
    Port interface for the filesystem operations the interpreter relies on.

    Paths passed in are absolute; the session resolves user-typed names
    against its own current directory before calling the port. Every method
    raises FileSystemError (with a typed kind) on failure.
    """

    @abstractmethod
    def get_current_directory(self) -> str:
        """
        Get the directory a new session starts in.

        Returns:
            Absolute path of the starting directory
        """
        pass

    @abstractmethod
    def create_file(self, path: str, content: str = "") -> None:
        """
        Create a file, or truncate an existing one, and write content to it.

        Args:
            path: Absolute path of the file
            content: Text content to write (UTF-8)

        Raises:
            FileSystemError: If the parent is missing or the path is a directory
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create a single directory.

        Args:
            path: Absolute path of the directory to create

        Raises:
            FileSystemError: ALREADY_EXISTS if the path exists, NOT_FOUND if
                the parent is missing
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Remove a regular file.

        Raises:
            FileSystemError: NOT_FOUND if absent, IS_A_DIRECTORY for directories
        """
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            FileSystemError: NOT_FOUND if absent, NOT_EMPTY if it has entries,
                NOT_A_DIRECTORY for files
        """
        pass

    @abstractmethod
    def change_directory(self, path: str) -> str:
        """
        Validate a directory as the new working directory.

        Args:
            path: Absolute path to move into

        Returns:
            The normalized absolute path of the directory

        Raises:
            FileSystemError: NOT_FOUND or NOT_A_DIRECTORY
        """
        pass

    @abstractmethod
    def list_directory(self, path: str) -> list[str]:
        """
        List the entry names of a directory, sorted lexicographically.

        Raises:
            FileSystemError: NOT_FOUND or NOT_A_DIRECTORY
        """
        pass

    @abstractmethod
    def read_file(self, path: str) -> str:
        """
        Read a text file.

        Raises:
            FileSystemError: NOT_FOUND or IS_A_DIRECTORY
        """
        pass
