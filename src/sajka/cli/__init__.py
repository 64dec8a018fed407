"""Command-line interface for sajka.

This module provides the CLI using Typer with rich output for
user-friendly feedback on stderr.

Key features:
- Word generation with a configurable syllable count
- Word rotation from text, file or stdin
- Reproducible output via --seed
- Detailed error reporting
"""

from sajka.cli.app import cli

__all__ = ["cli"]
