"""Application context for dependency injection.

Separates object creation from object use so CLI commands can be
exercised with test doubles instead of the real filesystem.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from pathentry.config import Settings, load_settings
from pathentry.entry import PathEntry
from pathentry.filesystem import RealFileSystem
from pathentry.protocols import FileSystem


@dataclass
class AppContext:
    """Container for the dependencies used by CLI commands.

    The filesystem is typed by its Protocol, so any structural match
    (including a MagicMock) can be injected.
    """

    settings: Settings = field(default_factory=Settings)
    filesystem: FileSystem = field(default_factory=RealFileSystem)

    def entry(self, path: str | os.PathLike[str]) -> PathEntry:
        """Create a PathEntry bound to this context's filesystem."""
        return PathEntry(path, self.filesystem)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Args:
        config_path: Override settings file (for testing).

    Returns:
        Configured AppContext.

    Raises:
        ValueError: If the settings file is invalid.
    """
    return AppContext(settings=load_settings(config_path), filesystem=RealFileSystem())
