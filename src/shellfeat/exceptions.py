"""Custom exception hierarchy for shellfeat.

Every error raised by the core layer inherits from
:class:`ShellFeatError` so that the CLI error boundary can render a
clean message (plus an optional hint) without a stack trace.

Hierarchy
---------
ShellFeatError
├── ValueRequiredError
├── InvalidValueError
├── FeatureStateError
└── EnvironmentError
"""

from __future__ import annotations


class ShellFeatError(Exception):
    """Base exception for all shellfeat errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class ValueRequiredError(ShellFeatError):
    """Raised when a setting was given without any value at all.

    An empty string is *not* missing: it is a valid, empty token list.
    """


class InvalidValueError(ShellFeatError):
    """Raised when a token is not part of the feature grammar."""

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.token: str | None = token
        """The offending token, trimmed, when one can be singled out."""


# --- Formatting ------------------------------------------------------------

class FeatureStateError(ShellFeatError):
    """Raised when a feature set reaches a renderer in an impossible state.

    This signals a programming error in the caller, never bad user input.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ShellFeatError):
    """Raised when an optional runtime dependency is not available."""
