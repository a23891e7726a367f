"""pacman adapter (Arch Linux and derivatives)."""

import logging

from pkgup.managers.base import ManagerAdapter, format_transition
from pkgup.models.environment import PackageManagerKind

logger = logging.getLogger(__name__)


class PacmanAdapter(ManagerAdapter):
    """Adapter for pacman.

    ``pacman -Qu`` prints ``name old -> new``, optionally followed by
    ``[ignored]`` for packages held back in pacman.conf.
    """

    @property
    def kind(self) -> PackageManagerKind:
        """Return pacman as the package manager."""
        return PackageManagerKind.PACMAN

    def refresh(self) -> None:
        self._run_privileged(["pacman", "-Sy"])

    def format_pending(self) -> list[str]:
        result = self._query(["pacman", "-Qu"])
        return parse_pending(result.stdout)

    def apply_updates(self) -> None:
        self._run_privileged(["pacman", "-Su", "--noconfirm"])

    def remove_orphans(self) -> None:
        """Remove orphaned dependencies.

        Orphans are queried first and passed to ``pacman -Rns``; with no
        orphans the removal is skipped, since pacman rejects an empty
        target list.
        """
        orphans = self._query(["pacman", "-Qdtq"]).stdout.split()
        if not orphans:
            logger.debug("No orphaned packages to remove")
            return
        self._run_privileged(["pacman", "-Rns", "--noconfirm", *orphans])


def parse_pending(output: str) -> list[str]:
    """Parse ``pacman -Qu`` output into formatted lines.

    Args:
        output: Raw stdout of ``pacman -Qu``.

    Returns:
        Formatted pending-update lines.
    """
    lines: list[str] = []
    for line in output.splitlines():
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 4 or parts[2] != "->":
            logger.debug("Skipping unrecognised pacman line: %r", line[:100])
            continue
        lines.append(format_transition(parts[0], parts[1], parts[3]))
    return lines
