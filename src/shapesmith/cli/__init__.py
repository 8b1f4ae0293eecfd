"""Command-line interface for shapesmith.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One generate command for every shape
- Rotation and scaling of the result
- Verbose/quiet output modes
- Detailed error reporting
"""

from shapesmith.cli.app import cli, main

__all__ = ["cli", "main"]
