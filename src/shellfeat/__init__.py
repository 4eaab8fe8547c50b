"""shellfeat — shell-integration feature flags for terminal emulators.

Parses the compact ``cursor:block:blink,no-title,sudo`` style value and
renders it back either for configuration output or for the environment
variable read by shell-integration scripts.
"""

from shellfeat.core.formatter import FormatMode, environment, format_features
from shellfeat.core.models import (
    Cursor,
    CursorShape,
    CursorStyle,
    FeatureSet,
    ShellIntegration,
)
from shellfeat.core.parser import parse_features, parse_shell_integration
from shellfeat.version import __version__

__all__: list[str] = [
    "Cursor",
    "CursorShape",
    "CursorStyle",
    "FeatureSet",
    "FormatMode",
    "ShellIntegration",
    "__version__",
    "environment",
    "format_features",
    "parse_features",
    "parse_shell_integration",
]
