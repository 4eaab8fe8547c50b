"""The one stderr console shared by every CLI writer.

Error lines, the ``--table`` summary and ``-v`` log records all go
through the same Rich console, so their output interleaves in order.
Rich is imported lazily; without it, :func:`echo` degrades to plain
``print`` on stderr.
"""

from __future__ import annotations

import functools
import sys
from typing import Any

from shellfeat.exceptions import EnvironmentError


@functools.lru_cache(maxsize=1)
def get_console() -> Any:
    """Return the process-wide Rich console targeting stderr.

    Raises
    ------
    EnvironmentError
        If Rich is not installed.  Failures are not cached, so a later
        call retries the import.
    """
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console(stderr=True)


def echo(*objects: object) -> None:
    """Write Rich renderables or markup to stderr, plainly if Rich is missing."""
    try:
        console = get_console()
    except EnvironmentError:
        print(*objects, file=sys.stderr)
        return
    console.print(*objects)
