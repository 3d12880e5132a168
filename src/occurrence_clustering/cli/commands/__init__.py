"""
CLI command modules for occurrence_clustering.

Each command module defines a single Typer-compatible command function.
"""

from occurrence_clustering.cli.commands.batch import batch_command
from occurrence_clustering.cli.commands.compare import compare_command
from occurrence_clustering.cli.commands.normalize import normalize_command

__all__ = [
    "batch_command",
    "compare_command",
    "normalize_command",
]
