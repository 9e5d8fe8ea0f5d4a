"""Combinations CLI - Command line interface for combinations."""

from __future__ import annotations

from combinations.cli.main import cli, run_generate


def main() -> None:
    """Main entry point for the combinations CLI."""
    cli()


__all__ = ["main", "cli", "run_generate"]
