"""
Path Command - Show the chain from a node up to the repository root.
"""

import json
import sys

import click

from ...core.highlight import path_to_root
from ..utils import echo_error, open_session


@click.command()
@click.argument("source")
@click.argument("node_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def path(source: str, node_id: str, as_json: bool):
    """
    Print the path from NODE_ID to the root (what hovering highlights).
    """
    opened = open_session(source)
    if opened is None:
        sys.exit(1)
    _, session = opened

    if not session.graph.has_node(node_id):
        echo_error(f"Node not found: {node_id}")
        sys.exit(1)

    chain = path_to_root(session.parent_index, node_id, session.max_highlight_hops)

    if as_json:
        click.echo(json.dumps({"node": node_id, "path": chain}))
        return

    click.echo(" → ".join(chain))
