"""Update log.

Appends a timestamped record of each update to a plain text file under
the state directory. Records are never rewritten; the file only grows.

Record format::

    2026-10-17 09:30:00 | update | 2 package(s) updated
    foo = [1.0] -> [1.1]
    bar = [2.0] -> [2.1]
    ----------------------------------------

or, when nothing was pending::

    2026-10-17 09:30:00 | update | No packages updated
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from pkgup.core.paths import get_log_path

logger = logging.getLogger(__name__)

NO_UPDATES_MESSAGE = "No packages updated"
SEPARATOR = "-" * 40
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ChangeLog:
    """Append-only log of package updates.

    Attributes:
        path: Location of the log file.
    """

    def __init__(
        self,
        path: Path | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize ChangeLog.

        Args:
            path: Optional override for the log file.
                  Default: ~/.local/state/pkgup/updates.log
            clock: Source of record timestamps.
        """
        self._path = path if path is not None else get_log_path()
        self._clock = clock

    @property
    def path(self) -> Path:
        """Path to the log file."""
        return self._path

    def ensure_exists(self) -> None:
        """Create the log file and its parent directory if missing."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.touch(exist_ok=True)

    def format_record(self, lines: list[str], label: str) -> str:
        """Build the text of one record.

        Args:
            lines: Formatted pending-update lines.
            label: Workflow that produced the record.

        Returns:
            Record text, newline terminated.
        """
        stamp = self._clock().strftime(TIMESTAMP_FORMAT)
        if not lines:
            return f"{stamp} | {label} | {NO_UPDATES_MESSAGE}\n"

        body = [f"{stamp} | {label} | {len(lines)} package(s) updated", *lines, SEPARATOR]
        return "\n".join(body) + "\n"

    def append(self, lines: list[str], label: str = "update") -> None:
        """Append one record to the log.

        Args:
            lines: Formatted pending-update lines.
            label: Workflow that produced the record.

        Raises:
            OSError: If the log file cannot be written.
        """
        self.ensure_exists()
        record = self.format_record(lines, label)
        with self._path.open("a", encoding="utf-8") as f:
            f.write(record)
        logger.debug("Logged %d update(s) to %s", len(lines), self._path)
