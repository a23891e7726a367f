"""Main CLI application entry point.

Defines the Typer application: detect the package manager, then show the
menu or run the configured workflow.
"""

from typing import Annotated

import typer

from pkgup import __version__
from pkgup.cli.menu import run_menu
from pkgup.core import workflows
from pkgup.core.changelog import ChangeLog
from pkgup.core.config import ConfigurationError, ensure_config
from pkgup.core.detect import detect_environment
from pkgup.core.scratch import ScratchFile, register_cleanup
from pkgup.core.workflows import WorkflowContext
from pkgup.managers import get_adapter
from pkgup.models.environment import RunMode
from pkgup.utils.formatting import print_error
from pkgup.utils.log import setup_logging

app = typer.Typer(
    name="pkgup",
    help="Check, update and clean packages with pacman, apt, apk or dnf.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pkgup version {__version__}")
        raise typer.Exit()


def dispatch(run_mode: RunMode, context: WorkflowContext) -> None:
    """Run the workflow selected by the configured run mode.

    Non-interactive modes finish with an extra clean.

    Raises:
        ConfigurationError: If the run mode is not recognised.
        typer.Exit: When the interactive menu exits.
    """
    if run_mode == RunMode.PROMPT:
        run_menu(context)
    elif run_mode == RunMode.UPDATE:
        workflows.update(context)
    elif run_mode == RunMode.FULL:
        workflows.full(context)
    else:
        raise ConfigurationError(f"invalid run mode: {run_mode!r}")

    workflows.clean(context)


@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug output, including failed package manager commands.",
        ),
    ] = False,
) -> None:
    """pkgup - one update workflow for pacman, apt, apk and dnf.

    Behaviour is set in ~/.config/pkgup/config.toml:

        run_mode = "prompt"   # prompt | update | full
        logging = "on"        # on | off
    """
    setup_logging(verbose)

    try:
        config = ensure_config()
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    scratch = ScratchFile.create()
    register_cleanup(scratch)

    try:
        environment = detect_environment()
        context = WorkflowContext(
            adapter=get_adapter(environment),
            scratch=scratch,
            changelog=ChangeLog() if config.logging_enabled else None,
        )
        dispatch(config.run_mode, context)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    finally:
        scratch.remove()


if __name__ == "__main__":
    app()
