"""
Visibility traversal.

A node is visible iff it can be reached from the root by following
structural links whose source is expanded. Collapsed nodes stay visible as
leaves of the visible graph; their children are hidden. Dependency links
are shown only when both endpoints are visible.

Collapse state is an immutable id -> bool map. Updates return a new map, so
a traversal always works on one consistent snapshot and any state can be
restored by keeping the previous map.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set

from ..config import ROOT_ID
from .exceptions import NodeNotFoundError
from .types import Link, RepoGraph, VisibleGraph

logger = logging.getLogger(__name__)


class CollapseState(Mapping[str, bool]):
    """Read-only map of node id -> collapsed flag."""

    def __init__(self, flags: Optional[Mapping[str, bool]] = None):
        self._flags: Dict[str, bool] = dict(flags or {})

    @classmethod
    def from_graph(cls, graph: RepoGraph) -> "CollapseState":
        """Initial state: root expanded, every other node collapsed."""
        return cls({node.id: node.collapsed for node in graph.iter_nodes()})

    def __getitem__(self, node_id: str) -> bool:
        return self._flags[node_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def is_collapsed(self, node_id: str) -> bool:
        """Unknown ids read as collapsed, the initial state of any node."""
        return self._flags.get(node_id, True)

    def with_collapsed(self, node_id: str, collapsed: bool) -> "CollapseState":
        if node_id not in self._flags:
            raise NodeNotFoundError(node_id)
        if self._flags[node_id] == collapsed:
            return self
        flags = dict(self._flags)
        flags[node_id] = collapsed
        return CollapseState(flags)

    def toggled(self, node_id: str) -> "CollapseState":
        """Return a new state with `node_id` flipped."""
        if node_id not in self._flags:
            raise NodeNotFoundError(node_id)
        return self.with_collapsed(node_id, not self._flags[node_id])

    def expanded_ids(self) -> List[str]:
        return [node_id for node_id, collapsed in self._flags.items() if not collapsed]


def compute_visible(
    graph: RepoGraph,
    state: Mapping[str, bool],
    extra_links: Iterable[Link] = (),
    max_steps: Optional[int] = None,
) -> VisibleGraph:
    """
    Compute the visible subgraph for the given collapse state.

    Iterative depth-first walk from the root with an explicit stack. Every
    id is expanded at most once and the walk stops after `max_steps` pops,
    so corrupted (cyclic) link sets still terminate with a partial result.

    Args:
        graph: The repository graph.
        state: Node id -> collapsed flag. Missing ids count as collapsed.
        extra_links: Dependency links kept outside the graph (the current
            selection's inferred imports).
        max_steps: Cap on stack pops. Defaults to nodes + links + 1.

    Returns:
        VisibleGraph: Visible nodes in graph order and the visible links.
    """
    if not graph.has_node(ROOT_ID):
        return VisibleGraph()

    extra = list(extra_links)
    if max_steps is None:
        max_steps = graph.node_count + graph.link_count + len(extra) + 1

    visible: Set[str] = set()
    visible_links: List[Link] = []
    stack: List[str] = [ROOT_ID]
    steps = 0
    truncated = False

    while stack:
        if steps >= max_steps:
            truncated = True
            logger.warning(f"Visibility traversal stopped after {steps} steps; graph may be cyclic")
            break
        steps += 1

        node_id = stack.pop()
        if node_id in visible:
            continue
        visible.add(node_id)

        if state.get(node_id, True):
            continue

        children = graph.children_of(node_id)
        # Reverse push keeps pops in child order
        for link in reversed(children):
            if not graph.has_node(link.target):
                logger.debug(f"Dropping structural link to unknown node '{link.target}'")
                continue
            visible_links.append(link)
            if link.target not in visible:
                stack.append(link.target)

    # Links are gathered in reverse child order per node; restore it. A
    # truncated walk may leave pushed targets that were never reached.
    visible_links = [
        link for link in _in_link_order(visible_links, graph.links)
        if link.target in visible
    ]

    for link in list(graph.dependency_links()) + extra:
        if link.source in visible and link.target in visible:
            visible_links.append(link)

    nodes = [node for node in graph.iter_nodes() if node.id in visible]
    return VisibleGraph(nodes=nodes, links=visible_links, truncated=truncated)


def _in_link_order(selected: List[Link], ordered: Iterable[Link]) -> List[Link]:
    chosen = set(selected)
    return [link for link in ordered if link in chosen]
