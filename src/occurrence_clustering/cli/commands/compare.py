from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from occurrence_clustering.cli.utils import load_record, write_json
from occurrence_clustering.core.exceptions import ClusteringError
from occurrence_clustering.features import RecordShape
from occurrence_clustering.relationships import FeatureAssertion, generate
from occurrence_clustering.relationships.policy import load_policy

console = Console()


def compare_command(
    first: Path = typer.Argument(..., exists=True, readable=True, help="First record (JSON object)"),
    second: Path = typer.Argument(..., exists=True, readable=True, help="Second record (JSON object)"),
    shape: RecordShape = typer.Option(
        RecordShape.INTERPRETED,
        "--shape",
        "-s",
        help="How the records are keyed",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON",
    ),
):
    """
    Compare two occurrence records and show which assertions fire.
    """
    try:
        o1 = load_record(first, shape)
        o2 = load_record(second, shape)
        policy = load_policy()
    except ClusteringError as exc:
        console.print(f"[red]{exc}[/red]", soft_wrap=True)
        raise typer.Exit(code=1)

    assertion = generate(o1, o2)
    linked = policy.links(assertion) if policy is not None else None

    if as_json:
        write_json(
            {
                "a": o1.id,
                "b": o2.id,
                "assertions": assertion.assertion_names(),
                "linked": linked,
            },
            out=None,
            pretty=True,
        )
        return

    table = Table(title=f"{o1.id or first.name} ~ {o2.id or second.name}")
    table.add_column("Assertion", style="bold")
    table.add_column("Fired", justify="center")

    for kind in FeatureAssertion:
        fired = assertion.justification_contains(kind)
        table.add_row(kind.value, "[green]yes[/green]" if fired else "[dim]-[/dim]")

    console.print(table)

    if linked is not None:
        console.print(f"Policy decision: {'[green]link[/green]' if linked else '[yellow]no link[/yellow]'}")
