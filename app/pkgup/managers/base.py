"""Abstract base class for package manager adapters.

This module defines the ManagerAdapter interface that every supported
package manager implements: refresh, format_pending, apply_updates and
remove_orphans.
"""

import logging
import subprocess
from abc import ABC, abstractmethod

from pkgup.models.environment import PackageManagerKind, PrivilegeEscalator
from pkgup.utils.shell import CommandResult, run_command

logger = logging.getLogger(__name__)


class ManagerAdapter(ABC):
    """Abstract base class for all package manager adapters.

    Privileged operations never raise on failure: a non-zero exit or a
    missing executable is logged at debug level and the workflow carries on.

    Attributes:
        escalator: Command prefixed to privileged operations.

    Example:
        >>> adapter = PacmanAdapter(PrivilegeEscalator.SUDO)
        >>> adapter.refresh()
        >>> for line in adapter.format_pending():
        ...     print(line)
    """

    def __init__(self, escalator: PrivilegeEscalator) -> None:
        """Initialize the adapter.

        Args:
            escalator: Privilege escalator used for mutating commands.
        """
        self._escalator = escalator

    @property
    def escalator(self) -> PrivilegeEscalator:
        """Return the privilege escalator in use."""
        return self._escalator

    @property
    @abstractmethod
    def kind(self) -> PackageManagerKind:
        """Return the package manager this adapter drives."""

    @abstractmethod
    def refresh(self) -> None:
        """Refresh the package database."""

    @abstractmethod
    def format_pending(self) -> list[str]:
        """List pending updates.

        Returns:
            One line per pending update, ``name = [old] -> [new]`` for
            managers whose output is parsed.
        """

    @abstractmethod
    def apply_updates(self) -> None:
        """Upgrade all packages without prompting."""

    @abstractmethod
    def remove_orphans(self) -> None:
        """Remove packages nothing depends on anymore and clean caches."""

    def _run_privileged(self, args: list[str]) -> None:
        """Run a command under the escalator, discarding output and failures.

        stdin is closed so a prompt the package manager did not expect fails
        instead of waiting on input nobody can see.

        Args:
            args: Package manager command and arguments.
        """
        command = [self._escalator.value, *args]
        try:
            result = run_command(command, stdin=subprocess.DEVNULL)
        except OSError as e:
            logger.debug("Could not run %s: %s", " ".join(command), e)
            return

        if not result.success:
            logger.debug(
                "%s exited with %d: %s",
                " ".join(command),
                result.returncode,
                result.stderr.strip() or "no error output",
            )

    def _query(self, args: list[str]) -> CommandResult:
        """Run an unprivileged query command and return its result.

        A failing query yields whatever it printed; a missing executable
        yields an empty result.

        Args:
            args: Package manager command and arguments.

        Returns:
            CommandResult of the query.
        """
        try:
            result = run_command(args)
        except OSError as e:
            logger.debug("Could not run %s: %s", " ".join(args), e)
            return CommandResult(stdout="", stderr=str(e), returncode=127)

        if not result.success:
            logger.debug("%s exited with %d", " ".join(args), result.returncode)
        return result


def format_transition(name: str, old: str, new: str) -> str:
    """Format one pending update as ``name = [old] -> [new]``."""
    return f"{name} = [{old}] -> [{new}]"
