"""Package manager adapters.

This module exports the adapter classes and a factory that picks the
adapter for a detected environment.
"""

from pkgup.managers.apk import ApkAdapter
from pkgup.managers.apt import AptAdapter
from pkgup.managers.base import ManagerAdapter
from pkgup.managers.dnf import DnfAdapter
from pkgup.managers.pacman import PacmanAdapter
from pkgup.models.environment import Environment, PackageManagerKind

ADAPTERS: dict[PackageManagerKind, type[ManagerAdapter]] = {
    PackageManagerKind.PACMAN: PacmanAdapter,
    PackageManagerKind.APT: AptAdapter,
    PackageManagerKind.APK: ApkAdapter,
    PackageManagerKind.DNF: DnfAdapter,
}


def get_adapter(environment: Environment) -> ManagerAdapter:
    """Create the adapter for a detected environment.

    Args:
        environment: Detected package manager and escalator.

    Returns:
        ManagerAdapter instance for the environment's package manager.
    """
    return ADAPTERS[environment.manager](environment.escalator)


__all__ = [
    "ADAPTERS",
    "ApkAdapter",
    "AptAdapter",
    "DnfAdapter",
    "ManagerAdapter",
    "PacmanAdapter",
    "get_adapter",
]
