"""
Core graph model and interactive queries.

Everything in this package is synchronous and free of I/O.
"""

from .builder import GraphBuilder, build_graph
from .dependencies import dependency_links, find_imports
from .exceptions import (
    DescriptorLoadError,
    InvalidRepositoryURL,
    NodeNotFoundError,
    RepovizError,
)
from .highlight import highlight_set, highlighted_links, path_to_root
from .parent_index import ParentIndex
from .session import ExplorerSession
from .stats import RepoStats, compute_stats
from .types import (
    DescriptorType,
    FileDescriptor,
    Link,
    LinkKind,
    Node,
    NodeGroup,
    RepoGraph,
    VisibleGraph,
)
from .visibility import CollapseState, compute_visible

__all__ = [
    "GraphBuilder",
    "build_graph",
    "dependency_links",
    "find_imports",
    "DescriptorLoadError",
    "InvalidRepositoryURL",
    "NodeNotFoundError",
    "RepovizError",
    "highlight_set",
    "highlighted_links",
    "path_to_root",
    "ParentIndex",
    "ExplorerSession",
    "RepoStats",
    "compute_stats",
    "DescriptorType",
    "FileDescriptor",
    "Link",
    "LinkKind",
    "Node",
    "NodeGroup",
    "RepoGraph",
    "VisibleGraph",
    "CollapseState",
    "compute_visible",
]
