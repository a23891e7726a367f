"""Update workflows.

The four top-level operations (check, update, clean, full) sequence calls
on a ManagerAdapter and, when logging is on, record changes in the update
log. Each workflow runs to completion regardless of individual command
failures.
"""

import logging
from dataclasses import dataclass

from pkgup.core.changelog import ChangeLog
from pkgup.core.scratch import ScratchFile
from pkgup.managers.base import ManagerAdapter
from pkgup.utils.formatting import console, create_pending_table, print_info, print_success

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WorkflowContext:
    """Everything a workflow needs, built once at startup.

    Attributes:
        adapter: Adapter for the detected package manager.
        scratch: Scratch file for the pending-update list.
        changelog: Update log, or None when logging is off.
    """

    adapter: ManagerAdapter
    scratch: ScratchFile
    changelog: ChangeLog | None = None


def stage_pending(context: WorkflowContext) -> list[str]:
    """List pending updates and store them in the scratch file.

    Returns:
        Pending-update lines as read back from the scratch file.

    Raises:
        OSError: If the scratch file cannot be written or read.
    """
    context.scratch.write(context.adapter.format_pending())
    return context.scratch.read_lines()


def check(context: WorkflowContext) -> int:
    """Refresh the database and show pending updates.

    Returns:
        Number of pending updates.
    """
    print_info("Refreshing package database...")
    context.adapter.refresh()

    pending = stage_pending(context)
    if not pending:
        print_success("No updates available.")
        return 0

    console.print(create_pending_table(pending, context.adapter.kind.value))
    console.print(f"\n[dim]{len(pending)} update(s) available[/]")
    return len(pending)


def update(context: WorkflowContext) -> None:
    """Refresh the database, log pending updates if enabled, and upgrade."""
    print_info("Refreshing package database...")
    context.adapter.refresh()

    if context.changelog is not None:
        pending = stage_pending(context)
        context.changelog.append(pending, label="update")

    print_info("Upgrading packages...")
    context.adapter.apply_updates()
    print_success("Done.")


def clean(context: WorkflowContext) -> None:
    """Remove orphaned packages."""
    print_info("Removing orphaned packages...")
    context.adapter.remove_orphans()
    print_success("Done.")


def full(context: WorkflowContext) -> None:
    """Update, then clean."""
    update(context)
    clean(context)
