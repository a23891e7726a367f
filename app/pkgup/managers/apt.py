"""APT adapter (Debian, Ubuntu and derivatives)."""

import logging
import re

from pkgup.managers.base import ManagerAdapter, format_transition
from pkgup.models.environment import PackageManagerKind

logger = logging.getLogger(__name__)

# bash/jammy-updates 5.1-6ubuntu1.1 amd64 [upgradable from: 5.1-6ubuntu1]
_UPGRADABLE_RE = re.compile(
    r"^(?P<name>[^/\s]+)/\S+\s+(?P<new>\S+)\s+\S+\s+\[upgradable from: (?P<old>[^\]]+)\]"
)


# Keep existing config files and never ask debconf questions.
NONINTERACTIVE_PREFIX = ["env", "DEBIAN_FRONTEND=noninteractive", "apt-get", "-y"]
DPKG_OPTIONS = ["-o", "Dpkg::Options::=--force-confdef", "-o", "Dpkg::Options::=--force-confold"]


class AptAdapter(ManagerAdapter):
    """Adapter for APT.

    Uses apt-get for mutations and ``apt list --upgradable`` for the
    pending list, which is the only apt frontend that reports both versions.
    """

    @property
    def kind(self) -> PackageManagerKind:
        """Return APT as the package manager."""
        return PackageManagerKind.APT

    def refresh(self) -> None:
        self._run_privileged(["apt-get", "update"])

    def format_pending(self) -> list[str]:
        result = self._query(["apt", "list", "--upgradable"])
        return parse_pending(result.stdout)

    def apply_updates(self) -> None:
        self._run_privileged([*NONINTERACTIVE_PREFIX, *DPKG_OPTIONS, "upgrade"])

    def remove_orphans(self) -> None:
        self._run_privileged([*NONINTERACTIVE_PREFIX, *DPKG_OPTIONS, "autoremove"])
        self._run_privileged([*NONINTERACTIVE_PREFIX, "autoclean"])


def parse_pending(output: str) -> list[str]:
    """Parse ``apt list --upgradable`` output into formatted lines.

    The ``Listing...`` header and anything else without an
    ``[upgradable from: ...]`` suffix is ignored.

    Args:
        output: Raw stdout of ``apt list --upgradable``.

    Returns:
        Formatted pending-update lines.
    """
    lines: list[str] = []
    for line in output.splitlines():
        match = _UPGRADABLE_RE.match(line.strip())
        if match is None:
            if "[upgradable from:" in line:
                logger.debug("Skipping unrecognised apt line: %r", line[:100])
            continue
        lines.append(format_transition(match["name"], match["old"], match["new"]))
    return lines
