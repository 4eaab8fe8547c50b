"""Tests for the feature renderer (core/formatter.py)."""

from __future__ import annotations

import pytest

from shellfeat.core.formatter import (
    FormatMode,
    decscusr_code,
    environment,
    format_entry,
    format_features,
)
from shellfeat.core.models import Cursor, CursorShape, CursorStyle, FeatureSet
from shellfeat.core.parser import parse_features
from shellfeat.exceptions import FeatureStateError, InvalidValueError
from shellfeat.utils.constants import ENV_VAR_NAME


def _fs(shape: CursorShape, style: CursorStyle = CursorStyle.DEFAULT, **flags: bool) -> FeatureSet:
    return FeatureSet(cursor=Cursor(shape=shape, style=style), **flags)


# ---------------------------------------------------------------------------
# Config mode
# ---------------------------------------------------------------------------

class TestConfigMode:
    @pytest.mark.parametrize(
        ("features", "expected"),
        [
            (_fs(CursorShape.BAR, CursorStyle.STEADY, title=True), "cursor:bar:steady,path,title"),
            (_fs(CursorShape.BAR, CursorStyle.BLINK, sudo=True), "cursor:bar:blink,path,sudo,title"),
            (_fs(CursorShape.DISABLED, title=True), "path,title"),
            (_fs(CursorShape.BLOCK, CursorStyle.BLINK, title=True), "cursor:block:blink,path,title"),
            (_fs(CursorShape.UNDERLINE), "cursor:underline,path,title"),
            (_fs(CursorShape.BAR), "cursor:bar,path,title"),
        ],
    )
    def test_render(self, features: FeatureSet, expected: str) -> None:
        assert format_features(features, FormatMode.CONFIG) == expected

    def test_config_is_default_mode(self) -> None:
        assert format_features(FeatureSet()) == "cursor:bar,path,title"

    def test_fields_in_alphabetical_order(self) -> None:
        assert (
            format_features(FeatureSet.all_enabled())
            == "cursor:bar,path,ssh-env,ssh-terminfo,sudo,title"
        )

    def test_nothing_enabled_is_empty(self) -> None:
        assert format_features(FeatureSet.all_disabled()) == ""

    def test_disabled_cursor_ignores_style(self) -> None:
        fs = _fs(CursorShape.DISABLED, CursorStyle.BLINK, path=False, title=False, sudo=True)
        assert format_features(fs) == "sudo"


# ---------------------------------------------------------------------------
# Env mode
# ---------------------------------------------------------------------------

class TestEnvMode:
    @pytest.mark.parametrize(
        ("features", "expected"),
        [
            (_fs(CursorShape.BAR, CursorStyle.STEADY, title=True), "cursor:6,path,title"),
            (_fs(CursorShape.BAR, CursorStyle.BLINK, sudo=True), "cursor:5,path,sudo,title"),
            (_fs(CursorShape.DISABLED, title=True), "path,title"),
            (_fs(CursorShape.BLOCK, CursorStyle.BLINK, title=True), "cursor:1,path,title"),
            (_fs(CursorShape.UNDERLINE, CursorStyle.STEADY), "cursor:4,path,title"),
        ],
    )
    def test_render(self, features: FeatureSet, expected: str) -> None:
        assert format_features(features, FormatMode.ENV) == expected

    def test_default_style_follows_cursor_blink(self) -> None:
        fs = _fs(CursorShape.BLOCK)
        assert format_features(fs, FormatMode.ENV) == "cursor:1,path,title"
        assert format_features(fs, FormatMode.ENV, cursor_blink=False) == "cursor:2,path,title"

    def test_cursor_blink_ignored_for_explicit_style(self) -> None:
        fs = _fs(CursorShape.BAR, CursorStyle.STEADY)
        assert format_features(fs, FormatMode.ENV, cursor_blink=True) == "cursor:6,path,title"

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [("env", "cursor:2,path,title"), ("config", "cursor:block:steady,path,title")],
    )
    def test_mode_given_by_name(self, mode: str, expected: str) -> None:
        fs = _fs(CursorShape.BLOCK, CursorStyle.STEADY)
        assert format_features(fs, mode) == expected

    def test_unknown_mode_name(self) -> None:
        with pytest.raises(InvalidValueError) as exc_info:
            format_features(FeatureSet(), "yaml")
        assert exc_info.value.token == "yaml"

    def test_environment_entry(self) -> None:
        fs = _fs(CursorShape.UNDERLINE, CursorStyle.BLINK, ssh_env=True)
        assert environment(fs) == {ENV_VAR_NAME: "cursor:3,path,ssh-env,title"}


class TestDecscusrCode:
    @pytest.mark.parametrize(
        ("shape", "style", "code"),
        [
            (CursorShape.BAR, CursorStyle.BLINK, 5),
            (CursorShape.BAR, CursorStyle.STEADY, 6),
            (CursorShape.BLOCK, CursorStyle.BLINK, 1),
            (CursorShape.BLOCK, CursorStyle.STEADY, 2),
            (CursorShape.UNDERLINE, CursorStyle.BLINK, 3),
            (CursorShape.UNDERLINE, CursorStyle.STEADY, 4),
        ],
    )
    def test_table(self, shape: CursorShape, style: CursorStyle, code: int) -> None:
        assert decscusr_code(Cursor(shape=shape, style=style)) == code

    def test_disabled_cursor_is_a_state_error(self) -> None:
        with pytest.raises(FeatureStateError):
            decscusr_code(Cursor(shape=CursorShape.DISABLED, style=CursorStyle.BLINK))


# ---------------------------------------------------------------------------
# Entry formatter seam
# ---------------------------------------------------------------------------

class _RecordingFormatter:
    def __init__(self) -> None:
        self.entries: list[str] = []

    def format_entry(self, value: str) -> None:
        self.entries.append(value)


class TestFormatEntry:
    def test_writes_config_form(self) -> None:
        recorder = _RecordingFormatter()
        format_entry(_fs(CursorShape.BLOCK, CursorStyle.STEADY, sudo=True), recorder)
        assert recorder.entries == ["cursor:block:steady,path,sudo,title"]


# ---------------------------------------------------------------------------
# Re-parsing rendered output
# ---------------------------------------------------------------------------

class TestReparse:
    # Disabled fields are omitted, so only values keeping path, title and
    # the cursor enabled survive a round trip.
    @pytest.mark.parametrize(
        "value",
        [
            "true",
            "cursor:block:blink,sudo",
            "cursor:underline,ssh-env,ssh-terminfo",
            "cursor:steady",
            "sudo,no-sudo,ssh-env",
            "",
        ],
    )
    def test_config_output_reparses_to_same_value(self, value: str) -> None:
        features = parse_features(value)
        assert parse_features(format_features(features, FormatMode.CONFIG)) == features
