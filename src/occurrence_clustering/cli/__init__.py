"""
CLI package for occurrence_clustering.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from occurrence_clustering.cli.app import app, main

__all__ = [
    "app",
    "main",
]
