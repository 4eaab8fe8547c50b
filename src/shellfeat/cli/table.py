"""``shellfeat --table`` — per-feature summary of a parsed value.

Renders a Rich table with one row per field, in the same order the
formatter emits them.  Falls back to a plain-text table on stderr when
Rich is not installed.
"""

from __future__ import annotations

import sys

from shellfeat.cli.console import get_console
from shellfeat.core.formatter import decscusr_code
from shellfeat.core.models import Cursor, FeatureSet
from shellfeat.core.schema import SORTED_FIELDS, FieldKind


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def _cursor_detail(cursor: Cursor, cursor_blink: bool) -> str:
    """Describe an enabled cursor as ``block / blink (DECSCUSR 1)``."""
    code = decscusr_code(cursor, cursor_blink=cursor_blink)
    return f"{cursor.shape.value} / {cursor.style.value} (DECSCUSR {code})"


def feature_rows(
    features: FeatureSet, *, cursor_blink: bool = True,
) -> list[tuple[str, str, str]]:
    """Return ``(name, status, detail)`` rows in rendering order."""
    rows: list[tuple[str, str, str]] = []
    for desc in SORTED_FIELDS:
        value = desc.get(features)
        if desc.kind is FieldKind.CURSOR:
            if value.enabled:
                rows.append((desc.name, "on", _cursor_detail(value, cursor_blink)))
            else:
                rows.append((desc.name, "off", "disabled"))
        else:
            rows.append((desc.name, "on" if value else "off", ""))
    return rows


def _status_markup(status: str) -> str:
    return "[green]on[/green]" if status == "on" else "[dim]off[/dim]"


def _print_plain_table(rows: list[tuple[str, str, str]]) -> None:
    """Render the feature table without Rich."""
    print("\nshell-integration features", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Feature':<14} {'Status':<8} {'Detail':<32}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for name, status, detail in rows:
        print(f"{name:<14} {status:<8} {detail:<32}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def render_feature_table(features: FeatureSet, *, cursor_blink: bool = True) -> None:
    rows = feature_rows(features, cursor_blink=cursor_blink)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_table(rows)
        return

    table = Table(
        title="shell-integration features",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Feature", style="bold", min_width=12)
    table.add_column("Status", justify="center", min_width=6)
    table.add_column("Detail", min_width=20)

    for name, status, detail in rows:
        table.add_row(name, _status_markup(status), detail)

    console = get_console()
    console.print()
    console.print(table)
    console.print()
