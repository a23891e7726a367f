"""Unit tests for the pkgup entry point."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from pkgup import __version__
from pkgup.cli.main import app, dispatch
from pkgup.core.config import ConfigurationError
from pkgup.core.paths import get_config_path, get_log_path
from pkgup.core.scratch import ScratchFile
from pkgup.models.environment import Environment, PackageManagerKind, PrivilegeEscalator
from typer.testing import CliRunner

runner = CliRunner()


def _write_config(content: str) -> None:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def patched_runtime(mock_adapter: MagicMock, scratch: ScratchFile) -> Iterator[MagicMock]:
    """Patch detection, adapter construction and signal handling."""
    with (
        patch(
            "pkgup.cli.main.detect_environment",
            return_value=Environment(PackageManagerKind.PACMAN, PrivilegeEscalator.SUDO),
        ) as mock_detect,
        patch("pkgup.cli.main.get_adapter", return_value=mock_adapter),
        patch("pkgup.cli.main.ScratchFile.create", return_value=scratch),
        patch("pkgup.cli.main.register_cleanup"),
    ):
        yield mock_detect


class TestMain:
    """Tests for the pkgup command."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self) -> None:
        """--help describes the tool."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "pacman" in result.output

    def test_no_package_manager(
        self, patched_runtime: MagicMock, scratch: ScratchFile
    ) -> None:
        """Missing package manager exits 1 with an error."""
        patched_runtime.side_effect = ConfigurationError("no package manager found")

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "no package manager found" in result.output
        assert not scratch.exists()

    def test_invalid_run_mode(self, patched_runtime: MagicMock) -> None:
        """An invalid run mode exits 1 before anything runs."""
        _write_config('run_mode = "nightly"\n')

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "run_mode" in result.output
        patched_runtime.assert_not_called()

    def test_first_run_writes_default_config(self, patched_runtime: MagicMock) -> None:
        """The default config file is created on first run."""
        runner.invoke(app, [], input="0\n")

        assert 'run_mode = "prompt"' in get_config_path().read_text()

    def test_update_mode_end_to_end(
        self,
        patched_runtime: MagicMock,
        mock_adapter: MagicMock,
        scratch: ScratchFile,
    ) -> None:
        """Update mode logs pending updates, upgrades, then cleans."""
        _write_config('run_mode = "update"\nlogging = "on"\n')
        mock_adapter.format_pending.return_value = [
            "foo = [1.0] -> [1.1]",
            "bar = [2.0] -> [2.1]",
        ]

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert [c[0] for c in mock_adapter.method_calls] == [
            "refresh",
            "format_pending",
            "apply_updates",
            "remove_orphans",
        ]
        log_lines = get_log_path().read_text().splitlines()
        assert log_lines[0].endswith("| update | 2 package(s) updated")
        assert log_lines[1:3] == ["foo = [1.0] -> [1.1]", "bar = [2.0] -> [2.1]"]
        assert not scratch.exists()

    def test_full_mode_cleans_twice(
        self, patched_runtime: MagicMock, mock_adapter: MagicMock
    ) -> None:
        """Full mode runs its own clean plus the final clean."""
        _write_config('run_mode = "full"\nlogging = "off"\n')

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert mock_adapter.remove_orphans.call_count == 2
        mock_adapter.format_pending.assert_not_called()
        assert not get_log_path().exists()

    def test_prompt_mode_check_then_exit(
        self,
        patched_runtime: MagicMock,
        mock_adapter: MagicMock,
        scratch: ScratchFile,
    ) -> None:
        """Prompt mode runs check once, then exits on 0 without a final clean."""
        _write_config('run_mode = "prompt"\n')

        result = runner.invoke(app, [], input="1\n0\n")

        assert result.exit_code == 0
        assert "No updates available" in result.output
        assert result.output.count("Goodbye!") == 1
        mock_adapter.refresh.assert_called_once()
        mock_adapter.remove_orphans.assert_not_called()
        assert not scratch.exists()


def test_print_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Configuration errors are printed to standard error only."""
    from pkgup.utils.formatting import print_error

    print_error("no package manager found")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "no package manager found" in captured.err


def test_scratch_path_is_temporary(tmp_path: Path) -> None:
    """Scratch files are named after the tool."""
    assert ScratchFile.create(tmp_path).path.name.startswith("pkgup-")


def test_dispatch_rejects_unknown_run_mode(mock_adapter: MagicMock, scratch: ScratchFile) -> None:
    """An unrecognised run mode is a configuration error and runs nothing."""
    from pkgup.core.workflows import WorkflowContext

    context = WorkflowContext(adapter=mock_adapter, scratch=scratch)

    with pytest.raises(ConfigurationError, match="invalid run mode"):
        dispatch("nightly", context)  # type: ignore[arg-type]

    assert mock_adapter.method_calls == []
