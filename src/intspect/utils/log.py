"""Logging setup for the command-line entry point.

Modules log through ``logging.getLogger(__name__)``; only the CLI calls
:func:`configure_logging`, which routes records to stderr through a
Rich handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT: str = "%(name)s: %(message)s"


def configure_logging(verbose: bool = False, *, color: bool = True) -> logging.Logger:
    """Attach a single stderr :class:`RichHandler` to the package logger.

    The level is ``WARNING`` unless *verbose* is set, in which case it is
    ``DEBUG``.  Calling this again replaces the previous handler.
    """
    logger = logging.getLogger("intspect")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
