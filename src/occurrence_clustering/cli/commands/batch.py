from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from occurrence_clustering.cli.utils import load_pairs, write_json_lines
from occurrence_clustering.config import get_config
from occurrence_clustering.core.context import ComparisonContext
from occurrence_clustering.core.exceptions import ClusteringError
from occurrence_clustering.core.pipeline import ComparisonPipeline
from occurrence_clustering.features import RecordShape
from occurrence_clustering.logging import get_logger
from occurrence_clustering.relationships.policy import load_policy

console = Console()
log = get_logger(__name__)


def batch_command(
    pairs_file: Path = typer.Argument(..., exists=True, readable=True, help="JSON lines of {'a': ..., 'b': ...}"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write results to file instead of stdout",
    ),
    shape: RecordShape = typer.Option(
        RecordShape.INTERPRETED,
        "--shape",
        "-s",
        help="How the records are keyed",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print a summary table",
    ),
):
    """
    Compare every candidate pair in a JSON lines file.
    """
    cfg = get_config()

    try:
        pairs = load_pairs(pairs_file, shape)
        ctx = ComparisonContext(
            config=cfg,
            logger=log,
            policy=load_policy(),
            debug=cfg.debug,
        )
        results = [result.to_dict() for result in ComparisonPipeline(ctx).run(pairs)]
    except ClusteringError as exc:
        console.print(f"[red]{exc}[/red]", soft_wrap=True)
        raise typer.Exit(code=1)

    write_json_lines(results, out=out)

    if verbose:
        stats = ctx.stats
        table = Table(title="Comparison summary")
        table.add_column("Metric", style="bold")
        table.add_column("Count", justify="right")

        table.add_row("Pairs", str(stats["pairs"]))
        table.add_row("With assertions", str(stats["with_assertions"]))
        if ctx.policy is not None:
            table.add_row("Linked", str(stats["linked"]))
        for name, count in sorted(stats["assertions"].items()):
            table.add_row(name, str(count))

        console.print(table)
