"""Core layer — pure parsing, formatting and the feature data model.

Rules
-----
* No ``print()`` calls.
* No filesystem, network or environment access.
* No imports from ``cli``.
"""

from shellfeat.core.formatter import (
    FormatMode,
    decscusr_code,
    environment,
    format_entry,
    format_features,
)
from shellfeat.core.models import (
    Cursor,
    CursorShape,
    CursorStyle,
    FeatureSet,
    ShellIntegration,
)
from shellfeat.core.parser import parse_features, parse_shell_integration
from shellfeat.core.protocols import EntryFormatter

__all__: list[str] = [
    "Cursor",
    "CursorShape",
    "CursorStyle",
    "EntryFormatter",
    "FeatureSet",
    "FormatMode",
    "ShellIntegration",
    "decscusr_code",
    "environment",
    "format_entry",
    "format_features",
    "parse_features",
    "parse_shell_integration",
]
