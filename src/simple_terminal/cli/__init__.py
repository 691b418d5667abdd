"""Command-line interface for simple-terminal."""

from simple_terminal.cli.app import create_app

__all__ = ["create_app"]
