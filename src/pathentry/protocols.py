"""Protocol definitions for the filesystem backend.

PathEntry never touches the operating system directly. Every primitive
it needs is declared here, so tests can substitute a double for the
real implementation.

All primitives except rmtree raise OSError (or a subclass) on
failure. Translating those errors into booleans, sentinels or
OperationError is the job of the caller.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for single-call filesystem primitives."""

    def exists(self, path: str) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def access(self, path: str, mode: int) -> bool:
        """Check the current process's permission on a path.

        Args:
            path: Path to check.
            mode: One of os.R_OK, os.W_OK, os.X_OK.

        Returns:
            True if access is granted, False otherwise.
        """
        ...

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        ...

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        ...

    def getsize(self, path: str) -> int:
        """Return the size of a path in bytes.

        Raises:
            OSError: If the size cannot be determined.
        """
        ...

    def getmtime(self, path: str) -> float:
        """Return the last modification time of a path.

        Raises:
            OSError: If the time cannot be determined.
        """
        ...

    def guess_type(self, path: str) -> str | None:
        """Guess the content type of a path.

        Returns:
            MIME type string, or None if no guess can be made.
        """
        ...

    def scandir(self, path: str) -> Iterator[os.DirEntry[str]]:
        """Iterate over the entries of a directory.

        Raises:
            OSError: If the directory cannot be read.
        """
        ...

    def touch(self, path: str) -> None:
        """Create an empty file, truncating it if it exists."""
        ...

    def mkdir(self, path: str, mode: int, parents: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            mode: Permission bits, applied verbatim.
            parents: Create missing ancestors as well.
        """
        ...

    def rename(self, src: str, dst: str) -> None:
        """Move src to dst, replacing dst if the OS allows it."""
        ...

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        ...

    def unlink(self, path: str) -> None:
        """Remove a file."""
        ...

    def rmtree(self, path: str) -> None:
        """Remove a directory tree, skipping entries that can't be removed.

        Unlike the other primitives this never raises. A symbolic link
        is not followed and is left in place.
        """
        ...

    def read_text(self, path: str) -> str:
        """Read the whole content of a file."""
        ...

    def append_text(self, path: str, content: str) -> None:
        """Append content to a file, creating it if absent."""
        ...

    def write_text(self, path: str, content: str) -> None:
        """Replace the content of a file, creating it if absent."""
        ...
