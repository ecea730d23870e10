"""
Stats Command - Summarize the repository graph.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ..utils import open_session

console = Console()


@click.command()
@click.argument("source")
@click.option("--top", default=3, type=int, help="Number of extensions to rank")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(source: str, top: int, as_json: bool):
    """
    Show node counts, depth and the most common file extensions.
    """
    opened = open_session(source)
    if opened is None:
        sys.exit(1)
    repository, session = opened

    summary = session.stats(top_n=top)

    if as_json:
        click.echo(summary.model_dump_json())
        return

    table = Table(title=f"📊 {repository.label}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Total nodes", str(summary.total_nodes))
    table.add_row("Folders", str(summary.folder_count))
    table.add_row("Files", str(summary.file_count))
    table.add_row("Depth", str(summary.max_depth))
    table.add_row("Bytes", str(summary.total_bytes))
    for ext, count in summary.top_extensions:
        table.add_row(f".{ext}", str(count))

    console.print(table)
