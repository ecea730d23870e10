"""
Deps Command - Infer which repository files a source file imports.

Reads the file (from disk or GitHub), scans it for ES-style import
statements and matches each import to a file by basename.
"""

import json
import sys

import click

from ..utils import echo_error, echo_info, echo_success, open_session


@click.command()
@click.argument("source")
@click.argument("file_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def deps(source: str, file_id: str, as_json: bool):
    """
    List the files FILE_ID probably imports.
    """
    opened = open_session(source)
    if opened is None:
        sys.exit(1)
    repository, session = opened

    node = session.graph.get_node(file_id)
    if node is None or not node.is_file:
        echo_error(f"Not a file in this repository: {file_id}")
        sys.exit(1)

    result = repository.read_file(file_id)
    if result.is_err():
        echo_error(f"Could not read {file_id}: {result.error}")
        sys.exit(1)

    links = session.select_file(file_id, result.unwrap())
    targets = [link.target for link in links]

    if as_json:
        click.echo(json.dumps({"file": file_id, "imports": targets}))
        return

    if not targets:
        echo_info(f"No recognizable imports in {file_id}")
        return

    echo_success(f"{len(targets)} inferred dependencies for {file_id}")
    for target in targets:
        click.echo(f"  🔗 {target}")
