"""
Graph Builder.

Converts the flat repository listing into a `RepoGraph`:
- One synthetic root node, expanded.
- One node per distinct path prefix, collapsed, linked to its parent by
  exactly one structural link.
- Dependency links from stylesheets to sibling scripts sharing a basename.

Nodes are memoized by id, so a folder reached through many files is created
once. Group assignment and the stylesheet heuristic only depend on the set
of descriptors, never on their order.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Union

from pydantic import ValidationError

from ..config import ROOT_ID, ROOT_NAME, SCRIPT_EXTENSIONS, STYLESHEET_EXTENSIONS
from .types import (
    DescriptorType,
    FileDescriptor,
    Link,
    LinkKind,
    Node,
    NodeGroup,
    RepoGraph,
)

logger = logging.getLogger(__name__)

DescriptorLike = Union[FileDescriptor, Mapping[str, Any]]


class GraphBuilder:
    """
    Accumulates descriptors and produces an immutable RepoGraph.

    The builder keeps plain dicts while descriptors are added and only
    materializes frozen nodes in `build()`.
    """

    def __init__(self):
        self._order: List[str] = [ROOT_ID]
        self._names: Dict[str, str] = {ROOT_ID: ROOT_NAME}
        self._children: Dict[str, List[str]] = {ROOT_ID: []}
        self._links: List[Link] = []
        self._blob_ids: Set[str] = set()
        self._prefix_ids: Set[str] = set()
        self._sizes: Dict[str, int] = {}
        self.skipped = 0

    def add_all(self, descriptors: Iterable[DescriptorLike]) -> "GraphBuilder":
        for descriptor in descriptors:
            self.add(descriptor)
        return self

    def add(self, descriptor: DescriptorLike) -> bool:
        """
        Add one descriptor. Returns False if it was skipped.

        A descriptor is validated as a whole before any node is created,
        so a rejected one never leaves partially linked nodes behind.
        """
        parsed = self._coerce(descriptor)
        if parsed is None:
            self.skipped += 1
            return False

        segments = _split_path(parsed.path)
        if segments is None:
            logger.debug(f"Skipping descriptor with malformed path: {parsed.path!r}")
            self.skipped += 1
            return False

        if segments[0] == ROOT_ID:
            logger.warning(f"Skipping '{parsed.path}': top-level '{ROOT_ID}' collides with the root id")
            self.skipped += 1
            return False

        parent_id = ROOT_ID
        current_path = ""
        last = len(segments) - 1

        for index, segment in enumerate(segments):
            node_id = f"{current_path}/{segment}" if current_path else segment

            if node_id not in self._names:
                self._order.append(node_id)
                self._names[node_id] = segment
                self._children[node_id] = []
                self._links.append(Link(source=parent_id, target=node_id, kind=LinkKind.STRUCTURAL))
                self._children[parent_id].append(node_id)

            if index < last:
                self._prefix_ids.add(node_id)
            elif parsed.type == DescriptorType.BLOB:
                self._blob_ids.add(node_id)
                if parsed.size is not None:
                    self._sizes[node_id] = parsed.size

            parent_id = node_id
            current_path = node_id

        return True

    def build(self) -> RepoGraph:
        """Materialize the graph, including stylesheet -> script links."""
        nodes: Dict[str, Node] = {}
        for node_id in self._order:
            group = self._group_of(node_id)
            nodes[node_id] = Node(
                id=node_id,
                name=self._names[node_id],
                group=group,
                collapsed=node_id != ROOT_ID,
                child_links=tuple(self._children[node_id]),
                size=self._sizes.get(node_id) if group == NodeGroup.FILE else None,
            )

        links = list(self._links)
        links.extend(_stylesheet_links(nodes))

        graph = RepoGraph(nodes=nodes, links=tuple(links))
        logger.debug(
            f"Built graph: {graph.node_count} nodes, {graph.link_count} links, "
            f"{self.skipped} descriptors skipped"
        )
        return graph

    def _group_of(self, node_id: str) -> NodeGroup:
        if node_id == ROOT_ID:
            return NodeGroup.ROOT
        if node_id in self._blob_ids and node_id not in self._prefix_ids:
            return NodeGroup.FILE
        return NodeGroup.FOLDER

    @staticmethod
    def _coerce(descriptor: DescriptorLike) -> Optional[FileDescriptor]:
        if isinstance(descriptor, FileDescriptor):
            return descriptor
        if not isinstance(descriptor, Mapping):
            logger.debug(f"Skipping non-mapping descriptor: {descriptor!r}")
            return None
        try:
            return FileDescriptor.model_validate(descriptor)
        except ValidationError as e:
            logger.debug(f"Skipping invalid descriptor {descriptor!r}: {e}")
            return None


def build_graph(descriptors: Iterable[DescriptorLike]) -> RepoGraph:
    """Build a RepoGraph from a flat descriptor listing."""
    return GraphBuilder().add_all(descriptors).build()


def _split_path(path: Optional[str]) -> Optional[List[str]]:
    """Split on '/', rejecting missing paths and empty segments."""
    if not path:
        return None
    segments = path.split("/")
    if any(not segment for segment in segments):
        return None
    return segments


def _stylesheet_links(nodes: Dict[str, Node]) -> List[Link]:
    """
    Link each stylesheet to sibling scripts with the same basename.

    "src/Button.css" gets a dependency link to "src/Button.js" and/or
    "src/Button.tsx" when those files exist.
    """
    links: List[Link] = []
    for node in nodes.values():
        if not node.is_file:
            continue
        ext = _matching_suffix(node.name, STYLESHEET_EXTENSIONS)
        if ext is None:
            continue
        stem = node.id[: -len(ext)]
        for script_ext in SCRIPT_EXTENSIONS:
            target = nodes.get(stem + script_ext)
            if target is not None and target.is_file:
                links.append(Link(source=node.id, target=target.id, kind=LinkKind.DEPENDENCY))
    return links


def _matching_suffix(name: str, suffixes: Iterable[str]) -> Optional[str]:
    for suffix in suffixes:
        if name.endswith(suffix) and len(name) > len(suffix):
            return suffix
    return None
