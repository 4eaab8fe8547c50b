"""CLI application entry point for shellfeat.

This module is the **sole error boundary** for the entire application.
It catches :class:`~shellfeat.exceptions.ShellFeatError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

The rendered feature string is the only thing written to stdout so the
command can be used in ``$(...)`` substitutions; diagnostics, tables
and errors go to stderr.
"""

from __future__ import annotations

import argparse
import sys

from shellfeat.cli import exit_codes
from shellfeat.cli.console import echo
from shellfeat.cli.logging_setup import configure_logging
from shellfeat.core.formatter import FormatMode, environment, format_features
from shellfeat.core.parser import parse_features
from shellfeat.exceptions import ShellFeatError
from shellfeat.utils.constants import ENV_VAR_NAME
from shellfeat.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``shellfeat <value>``                 — normalise to config form
    * ``shellfeat <value> --mode env``      — render for the environment
    * ``shellfeat <value> --export``        — ``NAME=value`` line
    * ``shellfeat <value> --table``         — per-feature summary
    """
    parser = argparse.ArgumentParser(
        prog="shellfeat",
        description="Parse and render shell-integration feature values.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each applied token to stderr.",
    )
    parser.add_argument(
        "value",
        nargs="?",
        default=None,
        help="Feature value, e.g. 'cursor:block:blink,no-title,sudo'.",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in FormatMode],
        default=FormatMode.CONFIG.value,
        help="Output form (default: %(default)s).",
    )
    parser.add_argument(
        "--no-cursor-blink",
        dest="cursor_blink",
        action="store_false",
        help="Treat a 'default' cursor style as steady rather than blinking "
        "when rendering DECSCUSR codes.",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help=f"Print an {ENV_VAR_NAME}=... assignment (implies --mode env).",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Show a per-feature summary table on stderr.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_render(args: argparse.Namespace) -> int:
    """Parse *args.value* and print it in the requested form."""
    features = parse_features(args.value)

    if args.table:
        from shellfeat.cli.table import render_feature_table

        render_feature_table(features, cursor_blink=args.cursor_blink)

    if args.export:
        for name, value in environment(
            features, cursor_blink=args.cursor_blink,
        ).items():
            print(f"{name}={value}")
        return exit_codes.SUCCESS

    print(
        format_features(
            features,
            FormatMode(args.mode),
            cursor_blink=args.cursor_blink,
        )
    )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the shellfeat CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.value is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)
    return _handle_render(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ShellFeatError as exc:
        echo(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            echo(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        echo("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        echo(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
