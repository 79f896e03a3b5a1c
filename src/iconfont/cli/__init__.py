"""Command-line interface for iconfont.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bars for outline construction
- Verbose/quiet output modes
- Optional manifest and HTML preview output
- Detailed error reporting
"""

from iconfont.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
