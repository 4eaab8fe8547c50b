"""Render :class:`FeatureSet` values back to text.

Two modes share one walk over the fields in case-insensitive
alphabetical order (:data:`~shellfeat.core.schema.SORTED_FIELDS`):

* **config** — human-readable, re-parseable: ``cursor:block:blink,path``.
* **env** — the cursor becomes its DECSCUSR code so shell scripts can
  emit ``CSI <code> SP q`` directly: ``cursor:1,path``.

Only enabled fields are emitted: flags that are ``True`` and a cursor
whose shape is not ``disabled``.
"""

from __future__ import annotations

import logging
from enum import Enum

from shellfeat.core.models import Cursor, CursorShape, CursorStyle, FeatureSet
from shellfeat.core.protocols import EntryFormatter
from shellfeat.core.schema import SORTED_FIELDS, FieldKind
from shellfeat.exceptions import FeatureStateError, InvalidValueError
from shellfeat.utils.constants import CURSOR_SEPARATOR, ENV_VAR_NAME, TOKEN_SEPARATOR

logger = logging.getLogger(__name__)


class FormatMode(str, Enum):
    CONFIG = "config"
    """Human-readable form for configuration output."""

    ENV = "env"
    """Compact form for the shell-integration environment variable."""


_DECSCUSR: dict[tuple[CursorShape, CursorStyle], int] = {
    (CursorShape.BLOCK, CursorStyle.BLINK): 1,
    (CursorShape.BLOCK, CursorStyle.STEADY): 2,
    (CursorShape.UNDERLINE, CursorStyle.BLINK): 3,
    (CursorShape.UNDERLINE, CursorStyle.STEADY): 4,
    (CursorShape.BAR, CursorStyle.BLINK): 5,
    (CursorShape.BAR, CursorStyle.STEADY): 6,
}


def decscusr_code(cursor: Cursor, *, cursor_blink: bool = True) -> int:
    """Return the DECSCUSR code for an enabled *cursor*.

    A ``default`` style follows the terminal's own blink setting,
    passed as *cursor_blink*.

    Raises
    ------
    FeatureStateError
        If the cursor is disabled; disabled cursors are never rendered.
    """
    if not cursor.enabled:
        raise FeatureStateError("A disabled cursor has no DECSCUSR code.")

    style = cursor.style
    if style is CursorStyle.DEFAULT:
        style = CursorStyle.BLINK if cursor_blink else CursorStyle.STEADY
    return _DECSCUSR[(cursor.shape, style)]


def _coerce_mode(mode: FormatMode | str) -> FormatMode:
    try:
        return FormatMode(mode)
    except ValueError:
        raise InvalidValueError(
            f"Unknown format mode {mode!r}.",
            token=str(mode),
            hint="Valid modes: " + ", ".join(m.value for m in FormatMode),
        ) from None


def _format_cursor(cursor: Cursor, mode: FormatMode, cursor_blink: bool) -> str:
    if mode is FormatMode.ENV:
        code = decscusr_code(cursor, cursor_blink=cursor_blink)
        return f"cursor{CURSOR_SEPARATOR}{code}"

    text = f"cursor{CURSOR_SEPARATOR}{cursor.shape.value}"
    if cursor.style is not CursorStyle.DEFAULT:
        text += f"{CURSOR_SEPARATOR}{cursor.style.value}"
    return text


def format_features(
    features: FeatureSet,
    mode: FormatMode | str = FormatMode.CONFIG,
    *,
    cursor_blink: bool = True,
) -> str:
    """Render *features* as a comma-separated list of enabled fields.

    Parameters
    ----------
    features:
        The value to render.
    mode:
        :attr:`FormatMode.CONFIG` or :attr:`FormatMode.ENV`, or its name
        (``"config"`` / ``"env"``).
    cursor_blink:
        The terminal's cursor blink setting, used in env mode to resolve
        a cursor whose style is ``default``.  Ignored in config mode.

    Raises
    ------
    InvalidValueError
        If *mode* is a string naming no :class:`FormatMode`.
    """
    mode = _coerce_mode(mode)
    parts: list[str] = []
    for desc in SORTED_FIELDS:
        value = desc.get(features)
        if desc.kind is FieldKind.CURSOR:
            if value.enabled:
                parts.append(_format_cursor(value, mode, cursor_blink))
        elif value:
            parts.append(desc.name)

    rendered = TOKEN_SEPARATOR.join(parts)
    logger.debug("Rendered features in %s mode: %r", mode.value, rendered)
    return rendered


def format_entry(features: FeatureSet, formatter: EntryFormatter) -> None:
    """Write the config-mode rendering of *features* through *formatter*."""
    formatter.format_entry(format_features(features, FormatMode.CONFIG))


def environment(features: FeatureSet, *, cursor_blink: bool = True) -> dict[str, str]:
    """Return the environment entry that advertises *features* to shells."""
    return {
        ENV_VAR_NAME: format_features(
            features, FormatMode.ENV, cursor_blink=cursor_blink,
        ),
    }
