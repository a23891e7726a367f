"""apk adapter (Alpine Linux)."""

import logging

from pkgup.managers.base import ManagerAdapter, format_transition
from pkgup.models.environment import PackageManagerKind

logger = logging.getLogger(__name__)


class ApkAdapter(ManagerAdapter):
    """Adapter for apk.

    ``apk version -l <`` prints ``name-ver-rN < newver-rN`` below an
    ``Installed: Available:`` header.
    """

    @property
    def kind(self) -> PackageManagerKind:
        """Return apk as the package manager."""
        return PackageManagerKind.APK

    def refresh(self) -> None:
        self._run_privileged(["apk", "update"])

    def format_pending(self) -> list[str]:
        result = self._query(["apk", "version", "-l", "<"])
        return parse_pending(result.stdout)

    def apply_updates(self) -> None:
        self._run_privileged(["apk", "upgrade"])

    def remove_orphans(self) -> None:
        # apk drops unneeded dependencies on its own; only the cache is left
        self._run_privileged(["apk", "cache", "clean"])


def split_package_version(pkgver: str) -> tuple[str, str] | None:
    """Split ``name-1.2.3-r0`` into ``("name", "1.2.3-r0")``.

    Returns:
        Tuple of (name, version), or None if there is no version suffix.
    """
    parts = pkgver.rsplit("-", 2)
    if len(parts) != 3 or not parts[0]:
        return None
    name, version, release = parts
    return name, f"{version}-{release}"


def parse_pending(output: str) -> list[str]:
    """Parse ``apk version -l <`` output into formatted lines.

    Args:
        output: Raw stdout of ``apk version``.

    Returns:
        Formatted pending-update lines.
    """
    lines: list[str] = []
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 3 or parts[1] != "<":
            continue
        split = split_package_version(parts[0])
        if split is None:
            logger.debug("Skipping unrecognised apk line: %r", line[:100])
            continue
        name, old = split
        lines.append(format_transition(name, old, parts[2]))
    return lines
