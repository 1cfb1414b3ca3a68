"""Command-line interface for shapegeom.

This module provides the CLI using Typer with rich output for
user-friendly query results.

Key features:
- One command per kernel query (distance, intersection, containment, ...)
- Integer or floating point arithmetic chosen from the input
- Quiet mode printing results only
- Structured logging to a file
"""

from shapegeom.cli.app import cli, main

__all__ = ["cli", "main"]
