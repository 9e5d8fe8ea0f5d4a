"""Combinations CLI entry point.

This module enables running combinations as:
    python -m combinations <command>
"""

from combinations.cli import main

if __name__ == "__main__":
    main()
