"""
Logging for the artifact size analyzer.

Log records go to stderr through rich so that reports written to stdout
can be piped or redirected untouched.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "artifact_size_analyzer"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Install a rich stderr handler and set the package log level.

    Args:
        verbose: Log per-artifact measurements and loaded files (DEBUG)
        quiet: Only log errors

    Returns:
        The ``artifact_size_analyzer`` root logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``artifact_size_analyzer`` namespace.

    ``get_logger(__name__)`` in a package module returns that module's
    logger; any other name is nested below the package root.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
