"""
Local file system adapter implementation for the interpreter's primitives.
"""

import errno
import logging
import os
from typing import Optional

from typing_extensions import override

from unix_emulator.exceptions import FileSystemError, FsErrorKind
from unix_emulator.ports.filesystem_port import FileSystemPort

_ERRNO_KINDS: dict[int, FsErrorKind] = {
    errno.ENOENT: FsErrorKind.NOT_FOUND,
    errno.EEXIST: FsErrorKind.ALREADY_EXISTS,
    errno.ENOTEMPTY: FsErrorKind.NOT_EMPTY,
    errno.ENOTDIR: FsErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: FsErrorKind.IS_A_DIRECTORY,
    errno.EACCES: FsErrorKind.PERMISSION_DENIED,
    errno.EPERM: FsErrorKind.PERMISSION_DENIED,
}


def error_from_os(exc: OSError, path: str) -> FileSystemError:
    """Translate an OSError into a typed FileSystemError."""
    kind = _ERRNO_KINDS.get(exc.errno or 0, FsErrorKind.OTHER)
    message = None if kind is not FsErrorKind.OTHER else (exc.strerror or str(exc))
    return FileSystemError(kind, path, message)


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(
        self,
        start_directory: Optional[str] = None,
        sandbox_root: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the adapter.

        Args:
            start_directory: Directory sessions start in. Defaults to the user's home.
            sandbox_root: When set, every path outside this root is refused.
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._sandbox_root = (
            os.path.abspath(os.path.expanduser(sandbox_root)) if sandbox_root else None
        )
        start = start_directory or self._sandbox_root or os.path.expanduser("~")
        self._start_directory = os.path.abspath(os.path.expanduser(start))

    @property
    def sandbox_root(self) -> Optional[str]:
        return self._sandbox_root

    def _guard(self, path: str) -> str:
        """
        Normalize a path and make sure it stays inside the sandbox root.

        Raises:
            FileSystemError: PERMISSION_DENIED if the path escapes the sandbox
        """
        p = os.path.normpath(os.path.abspath(path))
        if self._sandbox_root is None:
            return p
        # Symlinks are followed so a link inside the root cannot reach outside it.
        if not (
            self._within(self._sandbox_root, p)
            and self._within(os.path.realpath(self._sandbox_root), os.path.realpath(p))
        ):
            raise FileSystemError(
                FsErrorKind.PERMISSION_DENIED, path, "Outside of sandbox root"
            )
        return p

    @staticmethod
    def _within(root: str, path: str) -> bool:
        try:
            return os.path.commonpath([root, path]) == root
        except ValueError:
            return False

    @override
    def get_current_directory(self) -> str:
        start = self._start_directory
        if self._sandbox_root is not None:
            try:
                start = self._guard(start)
            except FileSystemError:
                self._logger.warning(
                    f"Start directory {start} is outside the sandbox, using {self._sandbox_root}"
                )
                start = self._sandbox_root
        if not os.path.isdir(start):
            raise FileSystemError(FsErrorKind.NOT_FOUND, start)
        return start

    @override
    def create_file(self, path: str, content: str = "") -> None:
        target = self._guard(path)
        try:
            with open(target, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            self._logger.info(f"Created file {target} ({len(content)} chars)")
        except OSError as e:
            raise error_from_os(e, path)
        except Exception as e:
            raise FileSystemError(FsErrorKind.OTHER, path, str(e))

    @override
    def create_directory(self, path: str) -> None:
        target = self._guard(path)
        try:
            os.mkdir(target)
            self._logger.info(f"Created directory {target}")
        except OSError as e:
            raise error_from_os(e, path)

    @override
    def remove_file(self, path: str) -> None:
        target = self._guard(path)
        if os.path.isdir(target) and not os.path.islink(target):
            raise FileSystemError(FsErrorKind.IS_A_DIRECTORY, path)
        try:
            os.remove(target)
            self._logger.info(f"Removed file {target}")
        except OSError as e:
            raise error_from_os(e, path)

    @override
    def remove_directory(self, path: str) -> None:
        target = self._guard(path)
        if os.path.exists(target) and not os.path.isdir(target):
            raise FileSystemError(FsErrorKind.NOT_A_DIRECTORY, path)
        try:
            os.rmdir(target)
            self._logger.info(f"Removed directory {target}")
        except OSError as e:
            # Some platforms report a non-empty directory as EEXIST.
            if e.errno == errno.EEXIST:
                raise FileSystemError(FsErrorKind.NOT_EMPTY, path)
            raise error_from_os(e, path)

    @override
    def change_directory(self, path: str) -> str:
        target = self._guard(path)
        if not os.path.exists(target):
            raise FileSystemError(FsErrorKind.NOT_FOUND, path)
        if not os.path.isdir(target):
            raise FileSystemError(FsErrorKind.NOT_A_DIRECTORY, path)
        if not os.access(target, os.X_OK):
            raise FileSystemError(FsErrorKind.PERMISSION_DENIED, path)
        return target

    @override
    def list_directory(self, path: str) -> list[str]:
        target = self._guard(path)
        try:
            return sorted(os.listdir(target))
        except OSError as e:
            raise error_from_os(e, path)

    @override
    def read_file(self, path: str) -> str:
        target = self._guard(path)
        if os.path.isdir(target):
            raise FileSystemError(FsErrorKind.IS_A_DIRECTORY, path)
        try:
            with open(target, "r", encoding="utf-8", errors="replace", newline="") as f:
                return f.read()
        except OSError as e:
            raise error_from_os(e, path)
