"""Process exit statuses returned by ``shellfeat``.

Shell-integration scripts call the command inside ``$(...)`` and branch
on ``$?``, so these values are part of the command's interface.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The value parsed and its rendering was written to stdout."""

GENERAL_ERROR: int = 1
"""The value was rejected (missing, unknown token, bad shape or style)."""

UNEXPECTED_ERROR: int = 2
"""An exception other than ShellFeatError reached the boundary.

argparse also exits with 2 on a usage error.
"""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted by SIGINT (128 + 2)."""
