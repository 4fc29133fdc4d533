"""Command-line interface for polytri.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for polygon processing
- Verbose/quiet output modes
- Dry-run mode for inspecting input
- Detailed error reporting
"""

from polytri.cli.app import cli, main

__all__ = ["cli", "main"]
