"""Path entries: an object-oriented view of a single filesystem path."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from pathentry.protocols import FileSystem

logger = logging.getLogger(__name__)

# Default permission bits for new directories
DEFAULT_PERMISSIONS = 0o775

READ_FAILED = "Can't read the content."
APPEND_FAILED = "Can't append the given content."
WRITE_FAILED = "Can't write the given content."


class OperationError(Exception):
    """Error raised when reading, appending or writing content fails."""

    pass


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from pathentry.filesystem import RealFileSystem

    return RealFileSystem()


class PathEntry:
    """A filesystem path that may or may not exist.

    Every query goes back to the filesystem; nothing is cached. Operations
    that create, move or remove report failure through their return value
    and never raise. Only read(), append() and write() raise, with
    OperationError.

    Attributes:
        path: The designated path, without a trailing separator.
    """

    def __init__(self, path: str | os.PathLike[str], filesystem: FileSystem | None = None) -> None:
        """Initialize the entry.

        Args:
            path: Path to designate. One trailing separator is removed.
            filesystem: Backend for filesystem calls. Defaults to RealFileSystem.
        """
        path = os.fspath(path)
        if path.endswith(os.sep):
            path = path[:-1]
        self.path = path
        self._fs = filesystem if filesystem is not None else _default_filesystem()

    def __str__(self) -> str:
        return self.get_path()

    def __repr__(self) -> str:
        return f"PathEntry({self.path!r})"

    def __fspath__(self) -> str:
        return self.path

    # ------------------------------------------------------------------
    # Path decomposition
    # ------------------------------------------------------------------

    def get_path(self) -> str:
        """Return the path of the entry."""
        return self.path

    def get_directory(self) -> str:
        """Return the parent directory of the entry.

        A bare name yields "." and the root yields itself. An empty path,
        as left by constructing from the bare separator, yields "".
        """
        if not self.path:
            return ""
        return os.path.dirname(self.path) or "."

    def get_name(self) -> str:
        """Return the final component of the path."""
        return os.path.basename(self.path)

    def get_extension(self) -> str:
        """Return the text after the last dot of the name, or an empty string."""
        _, dot, extension = self.get_name().rpartition(".")
        return extension if dot else ""

    def get_mime_type(self) -> str | None:
        """Return a best-effort content type, or None if unknown or missing."""
        if not self.exists():
            return None
        try:
            return self._fs.guess_type(self.path)
        except OSError as e:
            logger.debug("Could not guess type of %s: %s", self.path, e)
            return None

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return self._fs.exists(self.path)

    def can_execute(self) -> bool:
        return self._fs.access(self.path, os.X_OK)

    def can_read(self) -> bool:
        return self._fs.access(self.path, os.R_OK)

    def can_write(self) -> bool:
        return self._fs.access(self.path, os.W_OK)

    def is_file(self) -> bool:
        return self._fs.is_file(self.path)

    def is_directory(self) -> bool:
        return self._fs.is_dir(self.path)

    def length(self) -> int:
        """Return the size in bytes, or -1 on failure."""
        if not self.exists():
            return -1
        try:
            return self._fs.getsize(self.path)
        except OSError as e:
            logger.debug("Could not get size of %s: %s", self.path, e)
            return -1

    def size(self) -> int:
        """Alias of length()."""
        return self.length()

    def count(self) -> int:
        """Alias of length()."""
        return self.length()

    def last_modified(self) -> int:
        """Return the last modification time as a Unix timestamp, or -1 on failure."""
        if not self.exists():
            return -1
        try:
            return int(self._fs.getmtime(self.path))
        except OSError as e:
            logger.debug("Could not get mtime of %s: %s", self.path, e)
            return -1

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def _walk(
        self, directory: str, recursive: bool, show_hidden: bool
    ) -> Iterator[os.DirEntry[str]]:
        """Yield the entries below directory, each parent before its children."""
        try:
            entries = list(self._fs.scandir(directory))
        except OSError as e:
            logger.debug("Could not list %s: %s", directory, e)
            return

        for entry in entries:
            if not show_hidden and entry.name.startswith("."):
                continue
            yield entry
            if recursive and entry.is_dir(follow_symlinks=False):
                yield from self._walk(entry.path, recursive, show_hidden)

    def _list(self, recursive: bool, show_hidden: bool) -> Iterator[os.DirEntry[str]]:
        if not self.is_directory():
            return iter(())
        return self._walk(self.path, recursive, show_hidden)

    def list_all(self, recursive: bool = False, show_hidden: bool = False) -> list[str]:
        """Return the names of the files and directories in this directory.

        Args:
            recursive: Descend into subdirectories (pre-order).
            show_hidden: Include names starting with a dot.

        Links to directories are listed but not descended into.

        Returns:
            Entry names, or an empty list if this is not a directory.
        """
        return [entry.name for entry in self._list(recursive, show_hidden)]

    def list_directories(self, recursive: bool = False, show_hidden: bool = False) -> list[str]:
        """Return the names of the directories in this directory.

        Same arguments as list_all().
        """
        return [entry.name for entry in self._list(recursive, show_hidden) if entry.is_dir()]

    def list_files(self, recursive: bool = False, show_hidden: bool = False) -> list[str]:
        """Return the names of the regular files in this directory.

        Same arguments as list_all().
        """
        return [entry.name for entry in self._list(recursive, show_hidden) if entry.is_file()]

    # ------------------------------------------------------------------
    # Creation, moving and removal
    # ------------------------------------------------------------------

    def make_file(self, override: bool = False) -> bool:
        """Create an empty file.

        Args:
            override: Truncate the path if it already exists.

        Returns:
            True if the file has been created.
        """
        if self.exists() and not override:
            return False
        try:
            self._fs.touch(self.path)
        except OSError as e:
            logger.debug("Could not create file %s: %s", self.path, e)
            return False
        return True

    def make_directory(self, recursive: bool = False, permissions: int = DEFAULT_PERMISSIONS) -> bool:
        """Create a directory.

        Args:
            recursive: Create missing parent directories as well.
            permissions: Permission bits, applied regardless of the umask.

        Returns:
            True if the directory has been created, False if the path
            already exists or creation failed.
        """
        if self.exists():
            return False
        try:
            self._fs.mkdir(self.path, permissions, parents=recursive)
        except OSError as e:
            logger.debug("Could not create directory %s: %s", self.path, e)
            return False
        return True

    def move(self, destination: str | os.PathLike[str], override: bool = False) -> bool:
        """Move the entry to destination.

        On success this entry designates the destination afterwards.

        Args:
            destination: New path.
            override: Replace an existing destination.

        Returns:
            True if the entry has been moved.
        """
        if not self.exists():
            return False

        target = PathEntry(destination, self._fs)
        if target.exists() and not override:
            return False

        try:
            self._fs.rename(self.path, target.path)
        except OSError as e:
            logger.debug("Could not move %s to %s: %s", self.path, target.path, e)
            return False

        self.path = target.path
        return True

    def rename(self, new_name: str, override: bool = False) -> bool:
        """Rename the entry within its current directory.

        Any directory part of new_name is ignored.
        """
        name = PathEntry(new_name, self._fs).get_name()
        return self.move(os.path.join(self.get_directory(), name), override)

    def remove_directory(self, recursive: bool = False) -> bool:
        """Remove the directory.

        Without recursive, only an empty directory is removed. With
        recursive, the contents are removed first and True is returned once
        the traversal completes, even if some entry could not be removed.
        A symbolic link to a directory is left alone, along with its target.

        Returns:
            True if the directory has been removed.
        """
        if not recursive:
            try:
                self._fs.rmdir(self.path)
            except OSError as e:
                logger.debug("Could not remove directory %s: %s", self.path, e)
                return False
            return True

        if not self.is_directory():
            return False

        self._fs.rmtree(self.path)
        return True

    def remove_file(self) -> bool:
        """Remove the file.

        Returns:
            True if the file has been removed, False if this is not a
            regular file or removal failed.
        """
        if not self.is_file():
            return False
        try:
            self._fs.unlink(self.path)
        except OSError as e:
            logger.debug("Could not remove file %s: %s", self.path, e)
            return False
        return True

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def read(self) -> str:
        """Return the content of the file.

        Raises:
            OperationError: If the content can't be read.
        """
        try:
            return self._fs.read_text(self.path)
        except (OSError, ValueError) as e:
            raise OperationError(READ_FAILED) from e

    def append(self, content: str) -> None:
        """Append content to the file, creating it if needed.

        Raises:
            OperationError: If the content can't be appended.
        """
        try:
            self._fs.append_text(self.path, content)
        except (OSError, ValueError) as e:
            raise OperationError(APPEND_FAILED) from e

    def write(self, content: str) -> None:
        """Replace the content of the file, creating it if needed.

        Raises:
            OperationError: If the content can't be written.
        """
        try:
            self._fs.write_text(self.path, content)
        except (OSError, ValueError) as e:
            raise OperationError(WRITE_FAILED) from e
