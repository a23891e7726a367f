"""Unit tests for DnfAdapter."""

from unittest.mock import patch

from pkgup.managers.dnf import DnfAdapter
from pkgup.models.environment import PackageManagerKind, PrivilegeEscalator
from pkgup.utils.shell import CommandResult


class TestDnfAdapter:
    """Tests for DnfAdapter class."""

    def test_kind_is_dnf(self) -> None:
        """Adapter returns dnf as kind."""
        assert DnfAdapter(PrivilegeEscalator.SUDO).kind == PackageManagerKind.DNF

    def test_format_pending_passes_raw_lines(self, mock_dnf_output: str) -> None:
        """dnf lines are kept unformatted, blank lines dropped."""
        adapter = DnfAdapter(PrivilegeEscalator.SUDO)
        with patch("pkgup.managers.base.run_command") as mock_run:
            # check-update exits 100 when updates are available
            mock_run.return_value = CommandResult(
                stdout=mock_dnf_output, stderr="", returncode=100
            )

            lines = adapter.format_pending()

        assert len(lines) == 2
        assert lines[0].startswith("kernel.x86_64")
        assert "->" not in lines[0]

    def test_format_pending_empty(self, mock_empty_output: str) -> None:
        """No output means no pending updates."""
        adapter = DnfAdapter(PrivilegeEscalator.SUDO)
        with patch("pkgup.managers.base.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout=mock_empty_output, stderr="", returncode=0)

            assert adapter.format_pending() == []

    def test_commands(self) -> None:
        """Mutating commands are non-interactive."""
        adapter = DnfAdapter(PrivilegeEscalator.SUDO)
        with patch("pkgup.managers.base.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)

            adapter.refresh()
            adapter.apply_updates()
            adapter.remove_orphans()

        commands = [call[0][0] for call in mock_run.call_args_list]
        assert commands == [
            ["sudo", "dnf", "makecache"],
            ["sudo", "dnf", "-y", "upgrade"],
            ["sudo", "dnf", "-y", "autoremove"],
        ]
