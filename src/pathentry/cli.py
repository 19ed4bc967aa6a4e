"""CLI commands using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import click
import typer
from rich.console import Console
from rich.logging import RichHandler

from pathentry import __version__
from pathentry.context import AppContext, create_context
from pathentry.console import Output
from pathentry.entry import OperationError

app = typer.Typer(
    name="pathentry",
    help="Inspect and manipulate filesystem paths",
    no_args_is_help=True,
)

config_app = typer.Typer(help="Configuration commands")

app.add_typer(config_app, name="config")

console = Console()
output = Output(console)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"pathentry v{__version__}")
        raise typer.Exit()


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output")
    ] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Settings file to use")
    ] = None,
) -> None:
    """Inspect and manipulate filesystem paths."""
    try:
        ctx.obj = create_context(config)
    except ValueError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e

    _configure_logging(logging.DEBUG if verbose else ctx.obj.settings.logging_level)


def _get_context(context: AppContext | None) -> AppContext:
    """Return the injected context, the one built by main(), or a default one."""
    if context is not None:
        return context
    click_ctx = click.get_current_context(silent=True)
    if click_ctx is not None and isinstance(click_ctx.obj, AppContext):
        return click_ctx.obj
    try:
        return create_context()
    except ValueError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e


def _fail(message: str) -> None:
    """Report a failed operation and exit with status 1."""
    output.show_error(message)
    raise typer.Exit(1)


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command("info")
def info(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    _context=None,
) -> None:
    """Show metadata about a path."""
    ctx = _get_context(_context)
    output.show_entry(ctx.entry(path))


@app.command("ls")
def list_entries(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Descend into subdirectories")
    ] = False,
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Include hidden entries")
    ] = False,
    directories: Annotated[
        bool, typer.Option("--dirs", "-d", help="Only list directories")
    ] = False,
    files: Annotated[bool, typer.Option("--files", "-f", help="Only list files")] = False,
    _context=None,
) -> None:
    """List the contents of a directory."""
    ctx = _get_context(_context)
    entry = ctx.entry(path)

    if not entry.is_directory():
        _fail(f"Not a directory: {path}")

    if directories and files:
        _fail("--dirs and --files are mutually exclusive")

    show_hidden = show_all or ctx.settings.show_hidden
    if directories:
        names = entry.list_directories(recursive, show_hidden)
    elif files:
        names = entry.list_files(recursive, show_hidden)
    else:
        names = entry.list_all(recursive, show_hidden)
    output.show_names(names)


@app.command("cat")
def cat(
    path: Annotated[str, typer.Argument(help="File to print")],
    _context=None,
) -> None:
    """Print the content of a file."""
    ctx = _get_context(_context)
    try:
        content = ctx.entry(path).read()
    except OperationError as e:
        logger.debug("Read of %s failed", path, exc_info=True)
        _fail(str(e))
    typer.echo(content, nl=False)


# ============================================================================
# Mutating Commands
# ============================================================================


@app.command("touch")
def touch(
    path: Annotated[str, typer.Argument(help="File to create")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Truncate an existing file")
    ] = False,
    _context=None,
) -> None:
    """Create an empty file."""
    ctx = _get_context(_context)
    if not ctx.entry(path).make_file(override=force):
        _fail(f"Could not create file '{path}'")
    output.show_success(f"Created file '{path}'")


def _parse_mode(mode: str | None, default: int) -> int:
    """Parse an octal permission string."""
    if mode is None:
        return default
    try:
        return int(mode, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {mode}") from e


@app.command("mkdir")
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parents")
    ] = False,
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Octal permission bits")
    ] = None,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _get_context(_context)
    permissions = _parse_mode(mode, ctx.settings.directory_permissions)
    if not ctx.entry(path).make_directory(recursive=parents, permissions=permissions):
        _fail(f"Could not create directory '{path}'")
    output.show_success(f"Created directory '{path}'")


@app.command("mv")
def move(
    source: Annotated[str, typer.Argument(help="Path to move")],
    destination: Annotated[str, typer.Argument(help="New path")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Replace an existing destination")
    ] = False,
    _context=None,
) -> None:
    """Move a file or directory."""
    ctx = _get_context(_context)
    entry = ctx.entry(source)
    if not entry.move(destination, override=force):
        _fail(f"Could not move '{source}' to '{destination}'")
    output.show_success(f"Moved '{source}' to '{entry}'")


@app.command("rename")
def rename(
    path: Annotated[str, typer.Argument(help="Path to rename")],
    name: Annotated[str, typer.Argument(help="New name")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Replace an existing entry")
    ] = False,
    _context=None,
) -> None:
    """Rename a file or directory in place."""
    ctx = _get_context(_context)
    entry = ctx.entry(path)
    if not entry.rename(name, override=force):
        _fail(f"Could not rename '{path}' to '{name}'")
    output.show_success(f"Renamed '{path}' to '{entry}'")


@app.command("rm")
def remove(
    path: Annotated[str, typer.Argument(help="Path to remove")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Remove directory contents")
    ] = False,
    _context=None,
) -> None:
    """Remove a file or directory."""
    ctx = _get_context(_context)
    entry = ctx.entry(path)
    if entry.is_directory():
        removed = entry.remove_directory(recursive=recursive)
    else:
        removed = entry.remove_file()
    if not removed:
        _fail(f"Could not remove '{path}'")
    output.show_success(f"Removed '{path}'")


@app.command("append")
def append(
    path: Annotated[str, typer.Argument(help="File to append to")],
    content: Annotated[str, typer.Argument(help="Text to append")],
    _context=None,
) -> None:
    """Append text to a file."""
    ctx = _get_context(_context)
    try:
        ctx.entry(path).append(content)
    except OperationError as e:
        logger.debug("Append to %s failed", path, exc_info=True)
        _fail(str(e))
    output.show_success(f"Appended to '{path}'")


@app.command("write")
def write(
    path: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="New content")],
    _context=None,
) -> None:
    """Replace the content of a file."""
    ctx = _get_context(_context)
    try:
        ctx.entry(path).write(content)
    except OperationError as e:
        logger.debug("Write to %s failed", path, exc_info=True)
        _fail(str(e))
    output.show_success(f"Wrote '{path}'")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    _context=None,
) -> None:
    """Show current configuration."""
    ctx = _get_context(_context)
    output.show_settings(ctx.settings)


if __name__ == "__main__":
    app()
