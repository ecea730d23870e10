"""
Tree Command - Render the visible graph in the terminal.

Applies the same interactions a graphical viewer would (expand folders,
hover a node, select a file) and prints the resulting visible subgraph as
a tree. Collapsed folders show their child count instead of children.

Usage:
    repoviz tree .                          # Root level only
    repoviz tree . -e src/utils             # Expand down to src/utils
    repoviz tree . --expand-all -H src/App.js
    repoviz tree https://github.com/owner/repo -s src/App.js
"""

import sys
from collections import defaultdict
from typing import Collection, Dict, List, Mapping, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ...config import ROOT_ID
from ...core.exceptions import NodeNotFoundError
from ...core.session import ExplorerSession
from ...core.types import Node, NodeGroup, VisibleGraph
from ..utils import LoadedRepository, echo_error, echo_warning, open_session

console = Console()

GROUP_ICONS = {
    NodeGroup.ROOT: "📦",
    NodeGroup.FOLDER: "📁",
    NodeGroup.FILE: "📄",
}


@click.command()
@click.argument("source")
@click.option("-e", "--expand", "expand", multiple=True, help="Expand a node and its ancestors (repeatable)")
@click.option("--expand-all", is_flag=True, help="Expand every folder")
@click.option("-H", "--highlight", "focus", default=None, help="Highlight the path from a node to the root")
@click.option("-s", "--select", "selected", default=None, help="Select a file and show its inferred imports")
def tree(source: str, expand: Tuple[str, ...], expand_all: bool, focus: str, selected: str):
    """
    Render the visible repository graph as a tree.
    """
    opened = open_session(source)
    if opened is None:
        sys.exit(1)
    repository, session = opened

    try:
        apply_interactions(session, repository, expand, expand_all, selected)
    except NodeNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)

    highlight = session.highlight(focus) if focus else frozenset()
    visible = session.visible()

    console.print(render_tree(visible, session.state, highlight, repository.label))

    dependency_links = [link for link in visible.links if not link.is_structural]
    if dependency_links:
        console.print()
        console.print("[bold]Dependencies[/bold]")
        for link in dependency_links:
            console.print(f"  🔗 {escape(link.source)} → {escape(link.target)}")


def apply_interactions(
    session: ExplorerSession,
    repository: LoadedRepository,
    expand: Tuple[str, ...],
    expand_all: bool,
    selected: Optional[str],
) -> None:
    """Replay command line interactions against the session."""
    if expand_all:
        session.expand_all()

    for node_id in expand:
        session.expand_path(node_id)
        session.set_collapsed(node_id, False)

    if selected:
        node = session.graph.get_node(selected)
        if node is None:
            raise NodeNotFoundError(selected)
        session.expand_path(selected)
        if node.is_file:
            result = repository.read_file(selected)
            if result.is_err():
                # Selection is skipped; the graph stays as it was
                echo_warning(f"Could not read {selected}: {result.error}")
                return
            session.select_file(selected, result.unwrap())
            for link in session.selection_links:
                session.expand_path(link.target)


def render_tree(
    visible: VisibleGraph,
    state: Mapping[str, bool],
    highlight: Collection[str],
    label: str,
) -> Tree:
    """Build a rich Tree from the visible structural links."""
    nodes: Dict[str, Node] = {node.id: node for node in visible.nodes}
    children: Dict[str, List[str]] = defaultdict(list)
    for link in visible.links:
        if link.is_structural:
            children[link.source].append(link.target)

    root = nodes.get(ROOT_ID)
    if root is None:
        return Tree("[dim]Empty graph[/dim]")

    rich_root = Tree(_label(root, state, highlight, label))
    # Explicit stack: repositories can nest deeper than the recursion limit
    stack: List[Tuple[str, Tree]] = [(ROOT_ID, rich_root)]
    while stack:
        node_id, branch = stack.pop()
        for child_id in children.get(node_id, []):
            child = nodes.get(child_id)
            if child is None:
                continue
            child_branch = branch.add(_label(child, state, highlight))
            stack.append((child_id, child_branch))

    return rich_root


def _label(node: Node, state: Mapping[str, bool], highlight: Collection[str], name: str = "") -> str:
    icon = GROUP_ICONS[node.group]
    text = escape(name or node.name)

    if node.group == NodeGroup.FOLDER:
        if state.get(node.id, True):
            text += f" [dim](+{len(node.child_links)})[/dim]"
        text = f"[cyan]{text}[/cyan]"
    elif node.group == NodeGroup.ROOT:
        text = f"[bold]{text}[/bold]"

    if node.id in highlight:
        text = f"[bold yellow]{text}[/bold yellow]"

    return f"{icon} {text}"
