"""Console output for the command line."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from pathentry.config import Settings
    from pathentry.entry import PathEntry


def _yes_no(value: bool) -> str:
    return "[green]yes[/green]" if value else "[red]no[/red]"


def _kind(entry: PathEntry) -> str:
    if entry.is_directory():
        return "directory"
    if entry.is_file():
        return "file"
    if entry.exists():
        return "other"
    return "-"


class Output:
    """Rich output helpers used by CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_entry(self, entry: PathEntry) -> None:
        """Display everything known about an entry.

        Args:
            entry: Entry to describe.
        """
        modified = entry.last_modified()
        modified_text = (
            datetime.fromtimestamp(modified, tz=timezone.utc).isoformat()
            if modified != -1
            else "-"
        )
        size = entry.length()

        table = Table(title=entry.get_path(), show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value")

        table.add_row("Directory", entry.get_directory())
        table.add_row("Name", entry.get_name())
        table.add_row("Extension", entry.get_extension() or "-")
        table.add_row("MIME type", entry.get_mime_type() or "-")
        table.add_row("Exists", _yes_no(entry.exists()))
        table.add_row("Kind", _kind(entry))
        table.add_row(
            "Access",
            f"read {_yes_no(entry.can_read())}  "
            f"write {_yes_no(entry.can_write())}  "
            f"execute {_yes_no(entry.can_execute())}",
        )
        table.add_row("Size", str(size) if size != -1 else "-")
        table.add_row("Last modified", modified_text)

        self.console.print(table)

    def show_names(self, names: list[str]) -> None:
        """Display entry names, one per line."""
        if not names:
            self.console.print("[yellow]Empty[/yellow]")
            return
        for name in names:
            self.console.print(name, markup=False, highlight=False)

    def show_settings(self, settings: Settings) -> None:
        """Display the active settings."""
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Directory permissions: {settings.directory_permissions:#o}")
        self.console.print(f"  Show hidden: {settings.show_hidden}")
        self.console.print(f"  Log level: {settings.log_level}")

    def show_success(self, message: str) -> None:
        """Show success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Show error message."""
        self.console.print(f"[red]✗[/red] {message}")
