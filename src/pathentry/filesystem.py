"""Standard library implementation of the filesystem backend.

RealFileSystem wraps os, os.path, shutil and mimetypes calls one to one.
Satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import mimetypes
import os
import shutil
from collections.abc import Iterator


class RealFileSystem:
    """Production filesystem implementation."""

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return os.path.exists(path)

    def access(self, path: str, mode: int) -> bool:
        """Check the current process's permission on a path."""
        return os.access(path, mode)

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        return os.path.isfile(path)

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return os.path.isdir(path)

    def getsize(self, path: str) -> int:
        """Return the size of a path in bytes."""
        return os.path.getsize(path)

    def getmtime(self, path: str) -> float:
        """Return the last modification time of a path."""
        return os.path.getmtime(path)

    def guess_type(self, path: str) -> str | None:
        """Guess the content type from the path's extension."""
        if os.path.isdir(path):
            return "inode/directory"
        mime_type, _ = mimetypes.guess_type(path, strict=False)
        return mime_type

    def scandir(self, path: str) -> Iterator[os.DirEntry[str]]:
        """Iterate over the entries of a directory."""
        with os.scandir(path) as it:
            yield from it

    def touch(self, path: str) -> None:
        """Create an empty file, truncating it if it exists."""
        with open(path, "w", encoding="utf-8"):
            pass

    def mkdir(self, path: str, mode: int, parents: bool = False) -> None:
        """Create a directory with exactly the given permission bits.

        The process umask is swapped for the complement of mode while the
        directory is created, so missing ancestors get the same bits. This
        is not safe to call from several threads at once.
        """
        old_umask = os.umask(~mode & 0o777)
        try:
            if parents:
                os.makedirs(path, mode)
            else:
                os.mkdir(path, mode)
        finally:
            os.umask(old_umask)

    def rename(self, src: str, dst: str) -> None:
        """Move src to dst, replacing dst if the OS allows it."""
        os.replace(src, dst)

    def rmdir(self, path: str) -> None:
        """Remove an empty directory."""
        os.rmdir(path)

    def unlink(self, path: str) -> None:
        """Remove a file."""
        os.unlink(path)

    def rmtree(self, path: str) -> None:
        """Remove a directory tree, ignoring failures."""
        shutil.rmtree(path, ignore_errors=True)

    def read_text(self, path: str) -> str:
        """Read the whole content of a file."""
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()

    def append_text(self, path: str, content: str) -> None:
        """Append content to a file, creating it if absent."""
        with open(path, "a", encoding="utf-8", newline="") as f:
            f.write(content)

    def write_text(self, path: str, content: str) -> None:
        """Replace the content of a file, creating it if absent."""
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
