"""Parse textual feature values into :class:`FeatureSet` objects.

Grammar (comma-separated, each token trimmed of spaces and tabs)::

    true | false
    cursor[:<shape>[:<style>]]      shape: disabled|bar|block|underline
    cursor:blink | cursor:steady    shorthand for bar + that style
    no-cursor
    <flag> | no-<flag>              flag: path|ssh-env|ssh-terminfo|sudo|title

Tokens apply left to right on top of the defaults; a later token wins.
An all-blank value is an empty list and yields the defaults; an empty
token inside a list (``"path,,title"``) is invalid.
Parsing is all-or-nothing — the first bad token raises and no partial
value is returned.
"""

from __future__ import annotations

import dataclasses
import logging

from shellfeat.core.models import (
    Cursor,
    CursorShape,
    CursorStyle,
    FeatureSet,
    ShellIntegration,
)
from shellfeat.core.schema import FLAG_FIELDS
from shellfeat.exceptions import InvalidValueError, ValueRequiredError
from shellfeat.utils.constants import (
    CURSOR_SEPARATOR,
    NEGATION_PREFIX,
    TOKEN_SEPARATOR,
    WHITESPACE,
)

logger = logging.getLogger(__name__)

_CURSOR: str = "cursor"
_NO_CURSOR: str = NEGATION_PREFIX + _CURSOR

# Style names that may stand in for the shape: ``cursor:blink``.
_SHORTHAND_STYLES: dict[str, CursorStyle] = {
    CursorStyle.BLINK.value: CursorStyle.BLINK,
    CursorStyle.STEADY.value: CursorStyle.STEADY,
}


# ---------------------------------------------------------------------------
# Token helpers
# ---------------------------------------------------------------------------

def _lookup_shape(name: str, token: str) -> CursorShape:
    try:
        return CursorShape(name)
    except ValueError:
        raise InvalidValueError(
            f"Unknown cursor shape {name!r} in {token!r}.",
            token=token,
            hint="Valid shapes: " + ", ".join(s.value for s in CursorShape),
        ) from None


def _lookup_style(name: str, token: str) -> CursorStyle:
    try:
        return CursorStyle(name)
    except ValueError:
        raise InvalidValueError(
            f"Unknown cursor style {name!r} in {token!r}.",
            token=token,
            hint="Valid styles: " + ", ".join(s.value for s in CursorStyle),
        ) from None


def _apply_cursor(cursor: Cursor, token: str) -> Cursor:
    """Apply a ``cursor[:shape[:style]]`` token to *cursor*.

    Only the first two components after ``cursor`` are consulted;
    anything beyond them is ignored.
    """
    components = token.split(CURSOR_SEPARATOR)[1:]
    if not components:
        return Cursor()

    shape_name = components[0]
    if shape_name in _SHORTHAND_STYLES:
        return Cursor(shape=CursorShape.BAR, style=_SHORTHAND_STYLES[shape_name])

    cursor = dataclasses.replace(cursor, shape=_lookup_shape(shape_name, token))
    if len(components) > 1:
        cursor = dataclasses.replace(cursor, style=_lookup_style(components[1], token))
    return cursor


def _split_negation(token: str) -> tuple[str, bool]:
    """Return ``(name, enabled)`` for a possibly ``no-``-prefixed token."""
    if token.startswith(NEGATION_PREFIX):
        return token[len(NEGATION_PREFIX):], False
    return token, True


def _apply_token(features: FeatureSet, token: str) -> FeatureSet:
    """Return *features* with one trimmed token applied."""
    if token.startswith(_CURSOR):
        return dataclasses.replace(
            features, cursor=_apply_cursor(features.cursor, token),
        )

    if token == _NO_CURSOR:
        return dataclasses.replace(
            features,
            cursor=dataclasses.replace(features.cursor, shape=CursorShape.DISABLED),
        )

    name, enabled = _split_negation(token)
    descriptor = FLAG_FIELDS.get(name)
    if descriptor is None:
        raise InvalidValueError(
            f"Unknown shell-integration feature {token!r}.",
            token=token,
            hint="Valid features: cursor, "
            + ", ".join(FLAG_FIELDS)
            + " (prefix with 'no-' to disable), or 'true'/'false'.",
        )
    return descriptor.set(features, enabled)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_features(value: str | None) -> FeatureSet:
    """Parse a feature value such as ``"cursor:block,no-title,sudo"``.

    Parameters
    ----------
    value:
        The raw setting value.  ``None`` means the setting was given
        without a value; ``""`` is an empty token list and yields the
        defaults.

    Raises
    ------
    ValueRequiredError
        If *value* is ``None``.
    InvalidValueError
        If any token is not part of the grammar.
    """
    if value is None:
        raise ValueRequiredError(
            "A shell-integration feature value is required.",
            hint="Use 'true', 'false', or a comma-separated list of features.",
        )

    toggle = value.strip(WHITESPACE)
    if not toggle:
        return FeatureSet()
    if toggle == "true":
        logger.debug("Enabling every shell-integration feature")
        return FeatureSet.all_enabled()
    if toggle == "false":
        logger.debug("Disabling every shell-integration feature")
        return FeatureSet.all_disabled()

    features = FeatureSet()
    for raw in value.split(TOKEN_SEPARATOR):
        token = raw.strip(WHITESPACE)
        features = _apply_token(features, token)
        logger.debug("Applied feature token %r", token)
    return features


def parse_shell_integration(value: str | None) -> ShellIntegration:
    """Parse the shell-integration mode (``detect``, ``zsh``, ``none`` ...).

    Raises
    ------
    ValueRequiredError
        If *value* is ``None``.
    InvalidValueError
        If *value* does not name a known mode.
    """
    if value is None:
        raise ValueRequiredError("A shell-integration mode is required.")

    name = value.strip(WHITESPACE)
    try:
        return ShellIntegration(name)
    except ValueError:
        raise InvalidValueError(
            f"Unknown shell-integration mode {name!r}.",
            token=name,
            hint="Valid modes: " + ", ".join(m.value for m in ShellIntegration),
        ) from None
