"""``python -m shellfeat VALUE [--mode env]``, same as the console script."""

from __future__ import annotations

from shellfeat.cli.app import cli

if __name__ == "__main__":
    cli()
