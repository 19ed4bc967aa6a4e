"""Tests for CLI commands using context injection.

Commands accept a _context parameter, so they can be called directly
with a context bound to a temporary directory or a mock filesystem.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import typer
from typer.testing import CliRunner

from pathentry import __version__, cli
from pathentry.config import Settings
from pathentry.context import AppContext
from pathentry.filesystem import RealFileSystem


@pytest.fixture
def context() -> AppContext:
    """Create a context on the real filesystem with default settings."""
    return AppContext(settings=Settings(), filesystem=RealFileSystem())


@pytest.fixture
def mock_context(mock_filesystem: MagicMock) -> AppContext:
    """Create a context backed by the mock filesystem."""
    return AppContext(settings=Settings(), filesystem=mock_filesystem)


class TestInspectionCommands:
    """Tests for info, ls and cat."""

    def test_info(self, root_dir: Path, context: AppContext, capsys: pytest.CaptureFixture[str]) -> None:
        cli.info(path=str(root_dir / "file.txt"), _context=context)

        out = capsys.readouterr().out
        assert "file.txt" in out
        assert "text/plain" in out

    def test_ls(self, root_dir: Path, context: AppContext, capsys: pytest.CaptureFixture[str]) -> None:
        (root_dir / ".hidden").touch()

        cli.list_entries(path=str(root_dir), _context=context)

        lines = capsys.readouterr().out.splitlines()
        assert sorted(lines) == ["directory", "file.txt"]

    def test_ls_all_files_recursive(
        self, root_dir: Path, context: AppContext, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (root_dir / ".hidden").touch()
        (root_dir / "directory" / "inner.txt").touch()

        cli.list_entries(path=str(root_dir), recursive=True, show_all=True, files=True, _context=context)

        lines = capsys.readouterr().out.splitlines()
        assert sorted(lines) == [".hidden", "file.txt", "inner.txt"]

    def test_ls_uses_show_hidden_setting(
        self, root_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (root_dir / ".hidden").touch()
        ctx = AppContext(settings=Settings(show_hidden=True), filesystem=RealFileSystem())

        cli.list_entries(path=str(root_dir), directories=False, _context=ctx)

        assert ".hidden" in capsys.readouterr().out.splitlines()

    def test_ls_not_a_directory(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            cli.list_entries(path=str(root_dir / "file.txt"), _context=context)
        assert exc_info.value.exit_code == 1

    def test_ls_conflicting_filters(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            cli.list_entries(path=str(root_dir), directories=True, files=True, _context=context)
        assert exc_info.value.exit_code == 1

    def test_cat(self, root_dir: Path, context: AppContext, capsys: pytest.CaptureFixture[str]) -> None:
        (root_dir / "file.txt").write_text("hello")

        cli.cat(path=str(root_dir / "file.txt"), _context=context)

        assert capsys.readouterr().out == "hello"

    def test_cat_failure(self, root_dir: Path, context: AppContext, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            cli.cat(path=str(root_dir / "directory"), _context=context)

        assert exc_info.value.exit_code == 1
        assert "Can't read the content." in capsys.readouterr().out


class TestMutatingCommands:
    """Tests for touch, mkdir, mv, rename, rm, append and write."""

    def test_touch(self, root_dir: Path, context: AppContext) -> None:
        cli.touch(path=str(root_dir / "new.txt"), _context=context)

        assert (root_dir / "new.txt").is_file()

    def test_touch_existing_fails(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit) as exc_info:
            cli.touch(path=str(root_dir / "file.txt"), _context=context)
        assert exc_info.value.exit_code == 1

    def test_touch_force(self, root_dir: Path, context: AppContext) -> None:
        (root_dir / "file.txt").write_text("content")

        cli.touch(path=str(root_dir / "file.txt"), force=True, _context=context)

        assert (root_dir / "file.txt").read_text() == ""

    def test_mkdir_mode(self, root_dir: Path, context: AppContext) -> None:
        cli.mkdir(path=str(root_dir / "a" / "b"), parents=True, mode="750", _context=context)

        assert stat.S_IMODE(os.stat(root_dir / "a" / "b").st_mode) == 0o750

    def test_mkdir_uses_settings_permissions(self, root_dir: Path, mock_filesystem: MagicMock) -> None:
        ctx = AppContext(settings=Settings(directory_permissions=0o700), filesystem=mock_filesystem)

        cli.mkdir(path=str(root_dir / "private"), _context=ctx)

        mock_filesystem.mkdir.assert_called_once_with(str(root_dir / "private"), 0o700, parents=False)

    def test_mkdir_invalid_mode(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.BadParameter):
            cli.mkdir(path=str(root_dir / "x"), mode="rwx", _context=context)

    def test_mkdir_existing_fails(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit):
            cli.mkdir(path=str(root_dir / "directory"), _context=context)

    def test_mv(self, root_dir: Path, context: AppContext) -> None:
        cli.move(source=str(root_dir / "file.txt"), destination=str(root_dir / "moved.txt"), _context=context)

        assert (root_dir / "moved.txt").exists()
        assert not (root_dir / "file.txt").exists()

    def test_mv_onto_existing_requires_force(self, root_dir: Path, context: AppContext) -> None:
        (root_dir / "other.txt").write_text("other")

        with pytest.raises(typer.Exit):
            cli.move(source=str(root_dir / "file.txt"), destination=str(root_dir / "other.txt"), _context=context)

        cli.move(
            source=str(root_dir / "file.txt"),
            destination=str(root_dir / "other.txt"),
            force=True,
            _context=context,
        )
        assert (root_dir / "other.txt").read_text() == ""

    def test_rename(self, root_dir: Path, context: AppContext) -> None:
        cli.rename(path=str(root_dir / "file.txt"), name="renamed.txt", _context=context)

        assert (root_dir / "renamed.txt").exists()

    def test_rename_missing_fails(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit):
            cli.rename(path=str(root_dir / "fake.txt"), name="renamed.txt", _context=context)

    def test_rm_file(self, root_dir: Path, context: AppContext) -> None:
        cli.remove(path=str(root_dir / "file.txt"), _context=context)

        assert not (root_dir / "file.txt").exists()

    def test_rm_non_empty_directory_needs_recursive(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit):
            cli.remove(path=str(root_dir), _context=context)

        cli.remove(path=str(root_dir), recursive=True, _context=context)
        assert not root_dir.exists()

    def test_rm_missing_fails(self, root_dir: Path, context: AppContext) -> None:
        with pytest.raises(typer.Exit):
            cli.remove(path=str(root_dir / "fake.txt"), _context=context)

    def test_write_and_append(self, root_dir: Path, context: AppContext) -> None:
        target = str(root_dir / "notes.txt")

        cli.write(path=target, content="x", _context=context)
        cli.append(path=target, content="y", _context=context)

        assert Path(target).read_text() == "xy"

    @pytest.mark.parametrize(
        ("command", "message"),
        [
            (cli.write, "Can't write the given content."),
            (cli.append, "Can't append the given content."),
        ],
    )
    def test_content_failure(
        self,
        mock_context: AppContext,
        mock_filesystem: MagicMock,
        capsys: pytest.CaptureFixture[str],
        command,
        message: str,
    ) -> None:
        mock_filesystem.write_text.side_effect = IsADirectoryError("is a directory")
        mock_filesystem.append_text.side_effect = IsADirectoryError("is a directory")

        with pytest.raises(typer.Exit) as exc_info:
            command(path="/data", content="x", _context=mock_context)

        assert exc_info.value.exit_code == 1
        assert message in capsys.readouterr().out


class TestConfigCommands:
    """Tests for config commands."""

    def test_config_show(self, capsys: pytest.CaptureFixture[str]) -> None:
        ctx = AppContext(settings=Settings(directory_permissions=0o750, log_level="info"))

        cli.config_show(_context=ctx)

        out = capsys.readouterr().out
        assert "0o750" in out
        assert "INFO" in out


class TestApp:
    """Tests for the Typer application entry point."""

    def test_version(self) -> None:
        result = CliRunner().invoke(cli.app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_write_then_cat(self, tmp_path: Path) -> None:
        runner = CliRunner()
        config = ["--config", str(tmp_path / "missing.json")]
        target = str(tmp_path / "out.txt")

        written = runner.invoke(cli.app, [*config, "write", target, "hello"])
        shown = runner.invoke(cli.app, [*config, "cat", target])

        assert written.exit_code == 0
        assert shown.exit_code == 0
        assert shown.output == "hello"

    def test_config_file_reaches_commands(self, tmp_path: Path) -> None:
        """Test settings from --config are used by the invoked command."""
        config = tmp_path / "config.json"
        config.write_text('{"showHidden": true}')
        listed = tmp_path / "listed"
        listed.mkdir()
        (listed / ".hidden").touch()

        result = CliRunner().invoke(cli.app, ["--config", str(config), "ls", str(listed)])

        assert result.exit_code == 0
        assert ".hidden" in result.output.splitlines()

    def test_direct_call_without_cli_context(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test commands called outside the app fall back to create_context."""
        ctx = AppContext(settings=Settings(log_level="error"))
        monkeypatch.setattr(cli, "create_context", lambda: ctx)

        assert cli._get_context(None) is ctx

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "config.json"
        config.write_text("{not json")

        result = CliRunner().invoke(cli.app, ["--config", str(config), "config", "show"])

        assert result.exit_code == 1
