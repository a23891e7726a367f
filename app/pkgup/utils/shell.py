"""Shell execution utilities.

Provides subprocess execution with captured output and no timeout, since
package manager transactions can legitimately run for a long time.
"""

import subprocess
from dataclasses import dataclass
from typing import IO


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    stdin: int | IO[str] | None = None,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        stdin: Standard input for the command, e.g. ``subprocess.DEVNULL``.
            None inherits the caller's stdin.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        stdin=stdin,
        capture_output=True,
        text=True,
        check=False,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )
