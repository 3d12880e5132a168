from __future__ import annotations

import typer

from occurrence_clustering.cli.commands.batch import batch_command
from occurrence_clustering.cli.commands.compare import compare_command
from occurrence_clustering.cli.commands.normalize import normalize_command

app = typer.Typer(
    name="occurrence-clustering",
    help="Compare occurrence records from different datasets",
    add_completion=False,
)

app.command("compare")(compare_command)
app.command("batch")(batch_command)
app.command("normalize")(normalize_command)


def main():
    app()


if __name__ == "__main__":
    main()
