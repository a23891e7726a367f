"""Environment detection.

Decides which package manager and privilege escalator to use by looking
for marker paths under /etc. Detection runs once at startup.
"""

import logging
from pathlib import Path

from pkgup.core.config import ConfigurationError
from pkgup.models.environment import Environment, PackageManagerKind, PrivilegeEscalator

logger = logging.getLogger(__name__)

# Checked in order; the first existing marker wins.
MANAGER_MARKERS: tuple[tuple[str, PackageManagerKind], ...] = (
    ("etc/pacman.conf", PackageManagerKind.PACMAN),
    ("etc/apt", PackageManagerKind.APT),
    ("etc/apk", PackageManagerKind.APK),
    ("etc/dnf", PackageManagerKind.DNF),
)

DOAS_MARKER = "etc/doas.d"


def detect_manager(root: Path = Path("/")) -> PackageManagerKind:
    """Find the package manager installed on the system.

    Args:
        root: Filesystem root to inspect.

    Returns:
        The first PackageManagerKind whose marker exists.

    Raises:
        ConfigurationError: If no marker exists.
    """
    for marker, kind in MANAGER_MARKERS:
        if (root / marker).exists():
            logger.debug("Found %s, using %s", root / marker, kind.value)
            return kind
    raise ConfigurationError("no package manager found")


def detect_escalator(root: Path = Path("/")) -> PrivilegeEscalator:
    """Choose doas when its config directory exists, sudo otherwise."""
    if (root / DOAS_MARKER).is_dir():
        return PrivilegeEscalator.DOAS
    return PrivilegeEscalator.SUDO


def detect_environment(root: Path = Path("/")) -> Environment:
    """Detect the package manager and privilege escalator.

    Args:
        root: Filesystem root to inspect. Tests point this at a temporary tree.

    Returns:
        Immutable Environment for the rest of the process.

    Raises:
        ConfigurationError: If no supported package manager is found.
    """
    return Environment(manager=detect_manager(root), escalator=detect_escalator(root))
