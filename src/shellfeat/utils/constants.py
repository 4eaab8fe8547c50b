"""Grammar and environment constants shared by the core and CLI layers."""

from __future__ import annotations

WHITESPACE: str = " \t"
"""Characters stripped from both ends of each comma-separated token."""

TOKEN_SEPARATOR: str = ","

CURSOR_SEPARATOR: str = ":"
"""Separates ``cursor``, its shape and its style within one token."""

NEGATION_PREFIX: str = "no-"

ENV_VAR_NAME: str = "SHELL_INTEGRATION_FEATURES"
"""Environment variable read by the shell-integration scripts."""
