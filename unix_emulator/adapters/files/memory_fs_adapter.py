"""
In-memory file system adapter: a fully sandboxed tree that never touches disk.
"""

import logging
import posixpath
from typing import Optional

from typing_extensions import override

from unix_emulator.exceptions import FileSystemError, FsErrorKind
from unix_emulator.ports.filesystem_port import FileSystemPort


class InMemoryFileSystemAdapter(FileSystemPort):
    """Filesystem port backed by dictionaries, using POSIX path semantics."""

    def __init__(
        self,
        start_directory: str = "/home/user",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize an empty tree containing only the start directory and its parents.

        Args:
            start_directory: Absolute POSIX path sessions start in
            logger: Logger instance to use for logging
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._dirs: set[str] = {"/"}
        self._files: dict[str, str] = {}
        self._start_directory = self._norm(start_directory)
        self._make_parents(self._start_directory)

    @staticmethod
    def _norm(path: str) -> str:
        if not posixpath.isabs(path):
            path = "/" + path
        return posixpath.normpath(path).replace("//", "/")

    def _make_parents(self, path: str) -> None:
        parts = [p for p in path.split("/") if p]
        current = "/"
        for part in parts:
            current = posixpath.join(current, part)
            self._dirs.add(current)

    def _require_parent(self, path: str) -> None:
        parent = posixpath.dirname(path)
        if parent in self._files:
            raise FileSystemError(FsErrorKind.NOT_A_DIRECTORY, parent)
        if parent not in self._dirs:
            raise FileSystemError(FsErrorKind.NOT_FOUND, parent)

    def _children(self, path: str) -> list[str]:
        prefix = path.rstrip("/") + "/"
        names = set()
        for entry in list(self._dirs) + list(self._files):
            if entry != path and entry.startswith(prefix):
                rest = entry[len(prefix) :]
                if rest and "/" not in rest:
                    names.add(rest)
        return sorted(names)

    def _require_dir(self, path: str) -> str:
        p = self._norm(path)
        if p in self._files:
            raise FileSystemError(FsErrorKind.NOT_A_DIRECTORY, path)
        if p not in self._dirs:
            raise FileSystemError(FsErrorKind.NOT_FOUND, path)
        return p

    @override
    def get_current_directory(self) -> str:
        return self._start_directory

    @override
    def create_file(self, path: str, content: str = "") -> None:
        p = self._norm(path)
        if p in self._dirs:
            raise FileSystemError(FsErrorKind.IS_A_DIRECTORY, path)
        self._require_parent(p)
        self._files[p] = content
        self._logger.info(f"Created file {p} ({len(content)} chars)")

    @override
    def create_directory(self, path: str) -> None:
        p = self._norm(path)
        if p in self._dirs or p in self._files:
            raise FileSystemError(FsErrorKind.ALREADY_EXISTS, path)
        self._require_parent(p)
        self._dirs.add(p)
        self._logger.info(f"Created directory {p}")

    @override
    def remove_file(self, path: str) -> None:
        p = self._norm(path)
        if p in self._dirs:
            raise FileSystemError(FsErrorKind.IS_A_DIRECTORY, path)
        if p not in self._files:
            raise FileSystemError(FsErrorKind.NOT_FOUND, path)
        del self._files[p]
        self._logger.info(f"Removed file {p}")

    @override
    def remove_directory(self, path: str) -> None:
        p = self._require_dir(path)
        if p == "/":
            raise FileSystemError(FsErrorKind.PERMISSION_DENIED, path)
        if self._children(p):
            raise FileSystemError(FsErrorKind.NOT_EMPTY, path)
        self._dirs.discard(p)
        self._logger.info(f"Removed directory {p}")

    @override
    def change_directory(self, path: str) -> str:
        return self._require_dir(path)

    @override
    def list_directory(self, path: str) -> list[str]:
        return self._children(self._require_dir(path))

    @override
    def read_file(self, path: str) -> str:
        p = self._norm(path)
        if p in self._dirs:
            raise FileSystemError(FsErrorKind.IS_A_DIRECTORY, path)
        if p not in self._files:
            raise FileSystemError(FsErrorKind.NOT_FOUND, path)
        return self._files[p]
