"""Command-line interface for fontresolver.

A small diagnostic CLI built with Typer and Rich for inspecting which
fonts a host offers and how requests resolve against them.
"""

from fontresolver.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
