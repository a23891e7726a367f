"""dnf adapter (Fedora, RHEL and derivatives)."""

from pkgup.managers.base import ManagerAdapter
from pkgup.models.environment import PackageManagerKind


class DnfAdapter(ManagerAdapter):
    """Adapter for dnf.

    Pending updates are reported as the raw ``dnf check-update`` lines
    rather than ``name = [old] -> [new]``; check-update only prints the
    available version.
    """

    @property
    def kind(self) -> PackageManagerKind:
        """Return dnf as the package manager."""
        return PackageManagerKind.DNF

    def refresh(self) -> None:
        self._run_privileged(["dnf", "makecache"])

    def format_pending(self) -> list[str]:
        # check-update exits 100 when updates are available
        result = self._query(["dnf", "-q", "check-update"])
        return [line.rstrip() for line in result.stdout.splitlines() if line.strip()]

    def apply_updates(self) -> None:
        self._run_privileged(["dnf", "-y", "upgrade"])

    def remove_orphans(self) -> None:
        self._run_privileged(["dnf", "-y", "autoremove"])
