"""Logging for modgraph.

Diagram text goes to stdout so it can be redirected into a ``.mmd`` file.
Log records therefore go to stderr through a rich handler, plus an
optional plain-text log file.

What the library logs:
  - DEBUG: edges skipped by layering or rendering because an endpoint is
    not a registered module, classification totals, renderer selection
  - INFO: modules placed in the cycle fallback phase
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "modgraph"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """Install stderr (and optionally file) handlers for a CLI run.

    ``quiet`` wins over ``verbose``. The default level is WARNING, so a
    normal render prints nothing but the diagram.

    Args:
        verbose: Show DEBUG records, with source paths and traceback locals
        quiet: Show ERROR records only
        log_file: Also append records to this file

    Returns:
        The ``modgraph`` logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handlers: list[logging.Handler] = [_stderr_handler(verbose)]
    if log_file:
        handlers.append(_file_handler(log_file))

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``modgraph`` namespace.

    Library modules call ``get_logger(__name__)``. Names from outside the
    package (scripts, tests) are prefixed so ``setup_logging`` still
    controls them.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def _stderr_handler(verbose: bool) -> RichHandler:
    return RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,  # class identifiers may contain [brackets]
        show_time=True,
        show_path=verbose,
    )


def _file_handler(log_file: str) -> logging.FileHandler:
    handler = logging.FileHandler(log_file, mode="a")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler
