from __future__ import annotations

from typing import List

import typer
from rich.console import Console
from rich.table import Table

from occurrence_clustering.normalization import normalize_id, normalize_identifier

console = Console()


def normalize_command(
    values: List[str] = typer.Argument(..., help="Names or identifiers to normalize"),
    identifier: bool = typer.Option(
        False,
        "--identifier",
        "-i",
        help="Keep digits (catalog / record numbers)",
    ),
):
    """
    Show the comparison key for each value.
    """
    normalizer = normalize_identifier if identifier else normalize_id

    table = Table(title="Normalized keys")
    table.add_column("Value")
    table.add_column("Key", style="bold")

    for value in values:
        table.add_row(value, normalizer(value) or "")

    console.print(table)
