"""Command-line interface for elbowroute.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for arrow routing
- Verbose/quiet output modes
- Dry-run and arrow listing modes
- Detailed error reporting
"""

from elbowroute.cli.app import cli, main

__all__ = ["cli", "main"]
