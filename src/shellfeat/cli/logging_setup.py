"""Logging configuration for the ``shellfeat`` command.

The core layer only creates module loggers; handlers are attached here,
once, by the CLI.  Records go to stderr through Rich when it is
installed and through a plain stream handler otherwise.
"""

from __future__ import annotations

import logging
import sys

from shellfeat.cli.console import get_console

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    return RichHandler(
        console=get_console(),
        show_time=False,
        show_path=False,
    )


def configure_logging(*, verbose: bool = False) -> None:
    """Attach a single stderr handler to the ``shellfeat`` logger.

    Calling this again replaces the previous handler rather than
    stacking a second one.
    """
    root = logging.getLogger("shellfeat")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(_build_handler())
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
