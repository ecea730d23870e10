"""
Context Command - Print the text a summarization collaborator receives.

For a folder: its name, its direct child files and the repository path
list. For a file: its path, its source text and the path list.
"""

import sys

import click

from ...core.result import map_ok
from ..utils import echo_error, open_session


@click.command()
@click.argument("source")
@click.argument("node_id")
def context(source: str, node_id: str):
    """
    Print the summarization context for NODE_ID.
    """
    opened = open_session(source)
    if opened is None:
        sys.exit(1)
    repository, session = opened

    node = session.graph.get_node(node_id)
    if node is None:
        echo_error(f"Node not found: {node_id}")
        sys.exit(1)

    if not node.is_file:
        click.echo(session.folder_context(node_id))
        return

    result = map_ok(repository.read_file(node_id), lambda text: session.file_context(node_id, text))
    if result.is_err():
        echo_error(f"Could not read {node_id}: {result.error}")
        sys.exit(1)

    click.echo(result.unwrap())
