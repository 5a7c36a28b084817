"""Command-line interface for pathgeom.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- decode: shape document (JSON) to WKT geometry
- encode: WKT geometry to shape document
- info: node counts and decoded area of a shape document
"""

from pathgeom.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
