"""Environment models.

This module defines the package manager and privilege escalator kinds
detected at startup, and the configured run mode.
"""

from dataclasses import dataclass
from enum import Enum


class PackageManagerKind(str, Enum):
    """Supported package managers."""

    PACMAN = "pacman"
    APT = "apt"
    APK = "apk"
    DNF = "dnf"


class PrivilegeEscalator(str, Enum):
    """Commands used to run package manager mutations with elevated rights."""

    DOAS = "doas"
    SUDO = "sudo"


class RunMode(str, Enum):
    """What pkgup does when started.

    Attributes:
        PROMPT: Show the interactive menu.
        UPDATE: Run the update workflow without asking.
        FULL: Run the update workflow followed by a clean.
    """

    PROMPT = "prompt"
    UPDATE = "update"
    FULL = "full"


@dataclass(frozen=True, slots=True)
class Environment:
    """Detected system environment.

    Attributes:
        manager: Package manager found on this system.
        escalator: Command used to run privileged operations.
    """

    manager: PackageManagerKind
    escalator: PrivilegeEscalator
