"""Scratch file holding the current pending-update list.

The file lives for one process run: it is created at startup and removed
on every exit path, including termination by signal.
"""

import atexit
import logging
import os
import signal
import sys
import tempfile
from pathlib import Path
from types import FrameType

logger = logging.getLogger(__name__)

# Signals that remove the scratch file before terminating.
CLEANUP_SIGNALS: tuple[signal.Signals, ...] = (
    signal.SIGHUP,
    signal.SIGQUIT,
    signal.SIGTERM,
    signal.SIGINT,
    signal.SIGABRT,
)


class ScratchFile:
    """Process-lifetime file of formatted pending-update lines.

    Attributes:
        path: Location of the scratch file.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @classmethod
    def create(cls, directory: Path | None = None) -> "ScratchFile":
        """Create a fresh, empty scratch file.

        Args:
            directory: Directory for the file. Defaults to the system temp dir.

        Returns:
            ScratchFile pointing at the new file.
        """
        fd, name = tempfile.mkstemp(prefix="pkgup-", suffix=".list", dir=directory)
        os.close(fd)
        logger.debug("Created scratch file %s", name)
        return cls(Path(name))

    @property
    def path(self) -> Path:
        """Return the scratch file path."""
        return self._path

    def write(self, lines: list[str]) -> None:
        """Replace the file content with one line per entry."""
        self._path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")

    def read_lines(self) -> list[str]:
        """Read the pending-update lines back.

        Raises:
            OSError: If the file cannot be read.
        """
        return self._path.read_text(encoding="utf-8").splitlines()

    def exists(self) -> bool:
        """Check if the scratch file is present."""
        return self._path.exists()

    def remove(self) -> None:
        """Delete the scratch file. Safe to call more than once."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove scratch file %s: %s", self._path, e)


def register_cleanup(scratch: ScratchFile) -> None:
    """Remove the scratch file at interpreter exit and on termination signals.

    A caught signal removes the file and exits with status ``128 + signum``.

    Args:
        scratch: Scratch file to remove.
    """
    atexit.register(scratch.remove)

    def _handle(signum: int, frame: FrameType | None) -> None:
        scratch.remove()
        sys.exit(128 + signum)

    for sig in CLEANUP_SIGNALS:
        signal.signal(sig, _handle)
