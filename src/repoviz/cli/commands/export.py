"""
Export Command - Write the visible subgraph as JSON for a rendering surface.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from ...core.exceptions import NodeNotFoundError
from ...graph.export import to_json, to_render_payload
from ..utils import echo_error, echo_success, open_session


@click.command()
@click.argument("source")
@click.option("-o", "--output", default=None, help="Output file (defaults to stdout)")
@click.option("-e", "--expand", "expand", multiple=True, help="Expand a node and its ancestors (repeatable)")
@click.option("--expand-all", is_flag=True, help="Expand every folder")
@click.option("-H", "--highlight", "focus", default=None, help="Mark the path from a node to the root")
def export(source: str, output: Optional[str], expand: Tuple[str, ...], expand_all: bool, focus: Optional[str]):
    """
    Export the visible graph as {nodes, links, highlight} JSON.
    """
    opened = open_session(source)
    if opened is None:
        sys.exit(1)
    _, session = opened

    try:
        if expand_all:
            session.expand_all()
        for node_id in expand:
            session.expand_path(node_id)
            session.set_collapsed(node_id, False)
    except NodeNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)

    highlight = session.highlight(focus) if focus else None
    payload = to_render_payload(session.visible(), session.state, highlight)
    content = to_json(payload)

    if output is None:
        click.echo(content)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    echo_success(f"Wrote {len(payload['nodes'])} nodes to {output_path}")
