"""Interactive menu.

Reads numeric choices and dispatches to the workflows until the user
chooses to exit.
"""

from collections.abc import Callable

import typer

from pkgup.core import workflows
from pkgup.core.workflows import WorkflowContext
from pkgup.utils.formatting import console, print_warning

Workflow = Callable[[WorkflowContext], object]

EXIT_CHOICE = "0"

# Choice -> (label, workflow), in display order
MENU: dict[str, tuple[str, Workflow]] = {
    "1": ("Check for updates", workflows.check),
    "2": ("Update", workflows.update),
    "3": ("Remove orphaned packages", workflows.clean),
    "4": ("Full update and clean", workflows.full),
}


def print_menu() -> None:
    """Print the menu options."""
    console.print()
    for key, (label, _) in MENU.items():
        console.print(f"  [menu_key]{key}[/]) {label}")
    console.print(f"  [menu_key]{EXIT_CHOICE}[/]) Exit")


def run_menu(
    context: WorkflowContext,
    read: Callable[[str], str] | None = None,
) -> None:
    """Show the menu and run chosen workflows until the user exits.

    End of input is treated like the exit choice.

    Args:
        context: Workflow context passed to every workflow.
        read: Prompt function returning one line of input.

    Raises:
        typer.Exit: Always, with code 0, once the user exits.
    """
    prompt = read or console.input

    while True:
        print_menu()
        try:
            choice = prompt("Choice: ").strip()
        except EOFError:
            choice = EXIT_CHOICE

        if choice == EXIT_CHOICE:
            break

        entry = MENU.get(choice)
        if entry is None:
            print_warning(f"Invalid choice {choice!r}, try again.")
            continue

        _, workflow = entry
        workflow(context)

    console.print("Goodbye!")
    context.scratch.remove()
    raise typer.Exit(code=0)
