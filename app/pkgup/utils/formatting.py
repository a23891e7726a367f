"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

THEME = Theme(
    {
        "text": "#ffffff",
        "muted": "#b2bec3",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "bold #f53263",
        "info": "#0ec1c8",
        "menu_key": "bold #c1ff62",
        "bold_header": "bold #69B9A1",
        "dim": "#b2bec3",
    }
)


def _detect_color_system() -> str:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    "auto" otherwise to let Rich decide.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return "auto"


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_pending_table(lines: list[str], manager: str) -> Table:
    """Create a table listing pending updates.

    Lines are shown exactly as the manager adapter formatted them, so dnf's
    raw output fits the same single column as the parsed managers.

    Args:
        lines: Formatted pending-update lines.
        manager: Package manager name used in the title.

    Returns:
        Rich Table with one row per pending update.
    """
    table = Table(
        title=f"Pending Updates ({manager.upper()})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("Package", style="text", no_wrap=True)

    for line in lines:
        table.add_row(escape(line))

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}", soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
