"""
Repoviz - Explore a code repository as an interactive graph.

Repoviz turns the flat file listing of a repository into a node/link graph
and answers the questions an interactive viewer keeps asking:
which nodes are visible under the current expand/collapse state, which
chain of folders leads from a hovered node back to the root, and which
files a selected source file probably imports.

Key Components:
- core: Data types, graph building, visibility and highlight queries
- sources: GitHub and local directory listings, file content cache
- context: Text handed to summarization/chat collaborators
- graph: Export of the visible subgraph for rendering surfaces

Usage:
    from repoviz import ExplorerSession

    session = ExplorerSession.from_descriptors([{"path": "src/App.js"}])
    session.toggle("src")
    visible = session.visible()
"""

__version__ = "0.1.0"

from .core.builder import build_graph
from .core.session import ExplorerSession
from .core.types import (
    FileDescriptor, Link, LinkKind, Node, NodeGroup, RepoGraph, VisibleGraph,
)

__all__ = [
    "__version__",
    "build_graph",
    "ExplorerSession",
    "FileDescriptor",
    "Link",
    "LinkKind",
    "Node",
    "NodeGroup",
    "RepoGraph",
    "VisibleGraph",
]
