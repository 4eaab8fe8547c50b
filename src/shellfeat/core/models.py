"""Domain models for shellfeat.

All models are **frozen** dataclasses or string enums — immutable value
objects with no I/O and no references to shared state.  Any "change"
to a :class:`FeatureSet` goes through :func:`dataclasses.replace` and
produces a new value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ---------------------------------------------------------------------------
# Shell integration mode
# ---------------------------------------------------------------------------

class ShellIntegration(str, Enum):
    """Which shell the integration scripts are injected into."""

    NONE = "none"
    DETECT = "detect"
    BASH = "bash"
    ELVISH = "elvish"
    FISH = "fish"
    NUSHELL = "nushell"
    ZSH = "zsh"


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------

class CursorShape(str, Enum):
    """Cursor shape requested at the shell prompt.

    Member values are the exact names accepted and emitted in the
    textual grammar.
    """

    DISABLED = "disabled"
    BAR = "bar"
    BLOCK = "block"
    UNDERLINE = "underline"


class CursorStyle(str, Enum):
    """Blinking behaviour for the prompt cursor.

    ``DEFAULT`` defers to the terminal's own cursor blink setting.
    """

    DEFAULT = "default"
    BLINK = "blink"
    STEADY = "steady"


@dataclass(frozen=True, slots=True)
class Cursor:
    """Shape and style pair for the prompt cursor.

    ``style`` is only meaningful while ``shape`` is not
    :attr:`CursorShape.DISABLED`.
    """

    shape: CursorShape = CursorShape.BAR
    style: CursorStyle = CursorStyle.DEFAULT

    @property
    def enabled(self) -> bool:
        return self.shape is not CursorShape.DISABLED


# ---------------------------------------------------------------------------
# Feature set
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FeatureSet:
    """The full set of shell-integration features.

    Attribute names use underscores; the textual names (``ssh-env``,
    ``ssh-terminfo``) live in :mod:`shellfeat.core.schema`.
    """

    cursor: Cursor = field(default_factory=Cursor)
    """Prompt cursor shape and style."""

    path: bool = True
    """Report the working directory to the terminal."""

    ssh_env: bool = False
    """Propagate terminal environment variables over SSH."""

    ssh_terminfo: bool = False
    """Install the terminal's terminfo entry on SSH hosts."""

    sudo: bool = False
    """Preserve terminal settings inside ``sudo`` sessions."""

    title: bool = True
    """Report the running command as the window title."""

    @classmethod
    def all_enabled(cls) -> FeatureSet:
        """Every flag on and the default cursor (the ``true`` value)."""
        return cls(
            cursor=Cursor(),
            path=True,
            ssh_env=True,
            ssh_terminfo=True,
            sudo=True,
            title=True,
        )

    @classmethod
    def all_disabled(cls) -> FeatureSet:
        """Every flag off and the cursor disabled (the ``false`` value)."""
        return cls(
            cursor=Cursor(shape=CursorShape.DISABLED),
            path=False,
            ssh_env=False,
            ssh_terminfo=False,
            sudo=False,
            title=False,
        )

    def clone(self) -> FeatureSet:
        """Return an equal value.  There are no owned resources to copy."""
        return self
