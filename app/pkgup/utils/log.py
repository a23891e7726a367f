"""Diagnostic logging setup.

Attaches a Rich handler on stderr to the ``pkgup`` logger. This is unrelated
to the change log written by :mod:`pkgup.core.changelog`.
"""

import logging

from rich.logging import RichHandler

from pkgup.utils.formatting import err_console

LOGGER_NAME = "pkgup"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the application logger.

    Args:
        verbose: If True, emit debug messages (including suppressed
            package manager failures). Otherwise only warnings and above.

    Returns:
        The configured ``pkgup`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
