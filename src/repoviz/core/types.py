"""
Core type definitions for repoviz.

The graph is immutable once built: nodes and links are frozen pydantic
models and link endpoints are always plain id strings. Interactive state
(collapse flags, the current selection's dependency links) lives outside
the graph and is swapped, not mutated.
"""

import math
from collections import defaultdict
from enum import StrEnum
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..config import ROOT_ID


class NodeGroup(StrEnum):
    """Kinds of nodes in the repository graph."""
    ROOT = "root"
    FOLDER = "folder"
    FILE = "file"


class LinkKind(StrEnum):
    """Kinds of links between nodes."""
    STRUCTURAL = "structural"
    DEPENDENCY = "dependency"


class DescriptorType(StrEnum):
    """Entry types reported by a code-hosting listing."""
    BLOB = "blob"
    TREE = "tree"


class FileDescriptor(BaseModel):
    """
    One entry of the flat repository listing.

    Paths are repository-relative and `/`-separated. Entries with a missing
    path are tolerated here and skipped by the builder.
    """
    path: Optional[str] = None
    type: DescriptorType = DescriptorType.BLOB
    size: Optional[int] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("size", mode="before")
    @classmethod
    def coerce_size(cls, value: Any) -> Optional[int]:
        """Sizes are any non-negative number (truncated to bytes); anything else is dropped."""
        if value is None or isinstance(value, bool):
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(number) or number < 0:
            return None
        return int(number)


class Node(BaseModel):
    """
    A root, folder or file in the repository graph.

    `collapsed` is the initial interaction state only; the live state is
    held by `repoviz.core.visibility.CollapseState`.
    """
    id: str
    name: str
    group: NodeGroup
    collapsed: bool = True
    child_links: Tuple[str, ...] = ()
    size: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_root(self) -> bool:
        return self.group == NodeGroup.ROOT

    @property
    def is_file(self) -> bool:
        return self.group == NodeGroup.FILE

    @property
    def basename(self) -> str:
        """Name up to the first dot ("math.test.js" -> "math")."""
        return self.name.split(".", 1)[0]

    @property
    def extension(self) -> str:
        """Last extension without the dot, or "" when there is none."""
        if "." not in self.name.lstrip("."):
            return ""
        return self.name.rsplit(".", 1)[-1].lower()

    @property
    def depth(self) -> int:
        """Number of path segments; 0 for the root."""
        if self.is_root:
            return 0
        return self.id.count("/") + 1


class Link(BaseModel):
    """Directed link between two node ids."""
    source: str
    target: str
    kind: LinkKind = LinkKind.STRUCTURAL

    model_config = ConfigDict(frozen=True)

    @property
    def is_structural(self) -> bool:
        return self.kind == LinkKind.STRUCTURAL


class RepoGraph(BaseModel):
    """
    Nodes keyed by id plus the structural and build-time dependency links.

    Structural adjacency is derived from the link list once and cached, so
    traversals never scan the full link list per node.
    """
    nodes: Dict[str, Node] = Field(default_factory=dict)
    links: Tuple[Link, ...] = ()

    model_config = ConfigDict(frozen=True)

    _outgoing: Dict[str, List[Link]] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        outgoing: Dict[str, List[Link]] = defaultdict(list)
        for link in self.links:
            if link.is_structural:
                outgoing[link.source].append(link)
        self._outgoing = dict(outgoing)

    @property
    def root(self) -> Optional[Node]:
        return self.nodes.get(ROOT_ID)

    def get_node(self, node_id: str) -> Optional[Node]:
        """Retrieve a node by id."""
        return self.nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    def iter_nodes(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def structural_links(self) -> List[Link]:
        return [link for link in self.links if link.is_structural]

    def dependency_links(self) -> List[Link]:
        return [link for link in self.links if not link.is_structural]

    def children_of(self, node_id: str) -> List[Link]:
        """Structural links whose source is `node_id`."""
        return self._outgoing.get(node_id, [])

    def file_paths(self) -> List[str]:
        """Ids of all file nodes, in build order."""
        return [node.id for node in self.nodes.values() if node.is_file]

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def link_count(self) -> int:
        return len(self.links)


class VisibleGraph(BaseModel):
    """The subgraph reachable from the root under the current collapse state."""
    nodes: List[Node] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)
    truncated: bool = False

    @property
    def node_ids(self) -> FrozenSet[str]:
        return frozenset(node.id for node in self.nodes)

    def has_node(self, node_id: str) -> bool:
        return any(node.id == node_id for node in self.nodes)
