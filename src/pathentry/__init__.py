"""Object-oriented wrapper around filesystem paths."""

__version__ = "0.1.0"

from pathentry.entry import OperationError, PathEntry
from pathentry.protocols import FileSystem

__all__ = [
    "__version__",
    "FileSystem",
    "OperationError",
    "PathEntry",
]
