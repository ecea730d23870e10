"""
Explorer Session.

Glue between one analyzed repository and the event-driven shell that
drives it. The graph and its parent index never change for the lifetime of
the session; user interaction swaps immutable snapshots:

- a toggle replaces the CollapseState,
- a file selection replaces the tuple of inferred dependency links.

Swaps happen under a lock and traversals read both snapshots together, so
a traversal never sees a half-applied selection.
"""

import logging
import threading
from typing import FrozenSet, Iterable, List, Optional, Tuple

from ..config import (
    MAX_CONTEXT_SOURCE_CHARS,
    MAX_FILE_CONTEXT_PATHS,
    MAX_FOLDER_CONTEXT_PATHS,
    MAX_HIGHLIGHT_HOPS,
    Settings,
)
from ..context import file_context, folder_context
from .builder import DescriptorLike, build_graph
from .dependencies import dependency_links, find_imports
from .exceptions import NodeNotFoundError
from .highlight import highlight_set, path_to_root
from .parent_index import ParentIndex
from .stats import RepoStats, compute_stats
from .types import Link, Node, RepoGraph, VisibleGraph
from .visibility import CollapseState, compute_visible

logger = logging.getLogger(__name__)


class ExplorerSession:
    """
    Interactive state for one repository graph.

    Usage:
        session = ExplorerSession.from_descriptors(listing)
        session.toggle("src")
        visible = session.visible()
        path = session.highlight("src/App.js")
    """

    def __init__(
        self,
        graph: RepoGraph,
        max_highlight_hops: int = MAX_HIGHLIGHT_HOPS,
        max_context_source_chars: int = MAX_CONTEXT_SOURCE_CHARS,
        max_file_context_paths: int = MAX_FILE_CONTEXT_PATHS,
        max_folder_context_paths: int = MAX_FOLDER_CONTEXT_PATHS,
    ):
        self.graph = graph
        self.parent_index = ParentIndex.from_graph(graph)
        self.max_highlight_hops = max_highlight_hops
        self.max_context_source_chars = max_context_source_chars
        self.max_file_context_paths = max_file_context_paths
        self.max_folder_context_paths = max_folder_context_paths

        self._lock = threading.RLock()
        self._state = CollapseState.from_graph(graph)
        self._selection: Tuple[Link, ...] = ()
        self._selected_id: Optional[str] = None
        self._hover: Tuple[Optional[str], FrozenSet[str]] = (None, frozenset())

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[DescriptorLike],
        max_highlight_hops: int = MAX_HIGHLIGHT_HOPS,
    ) -> "ExplorerSession":
        return cls(build_graph(descriptors), max_highlight_hops=max_highlight_hops)

    @classmethod
    def from_settings(cls, descriptors: Iterable[DescriptorLike], settings: Settings) -> "ExplorerSession":
        """Build a session whose limits come from user settings."""
        return cls(
            build_graph(descriptors),
            max_highlight_hops=settings.max_highlight_hops,
            max_context_source_chars=settings.max_context_source_chars,
            max_file_context_paths=settings.max_file_context_paths,
            max_folder_context_paths=settings.max_folder_context_paths,
        )

    # =========================================================================
    # Collapse state
    # =========================================================================

    @property
    def state(self) -> CollapseState:
        with self._lock:
            return self._state

    def toggle(self, node_id: str) -> bool:
        """Flip one node's collapsed flag. Returns the new value."""
        with self._lock:
            self._state = self._state.toggled(node_id)
            return self._state.is_collapsed(node_id)

    def set_collapsed(self, node_id: str, collapsed: bool) -> None:
        with self._lock:
            self._state = self._state.with_collapsed(node_id, collapsed)

    def expand_path(self, node_id: str) -> None:
        """Expand every ancestor of `node_id` so the node itself is visible."""
        self._require(node_id)
        ancestors = path_to_root(self.parent_index, node_id, self.max_highlight_hops)[1:]
        with self._lock:
            state = self._state
            for ancestor in ancestors:
                state = state.with_collapsed(ancestor, False)
            self._state = state

    def expand_all(self) -> None:
        with self._lock:
            self._state = CollapseState({node_id: False for node_id in self.graph.nodes})

    def reset(self) -> None:
        """Back to the initial state: everything but the root collapsed."""
        with self._lock:
            self._state = CollapseState.from_graph(self.graph)

    # =========================================================================
    # Queries
    # =========================================================================

    def visible(self) -> VisibleGraph:
        with self._lock:
            state = self._state
            selection = self._selection
        return compute_visible(self.graph, state, extra_links=selection)

    def highlight(self, node_id: str) -> FrozenSet[str]:
        """Ids on the path from `node_id` to the root (last hover is memoized)."""
        hovered, cached = self._hover
        if hovered == node_id:
            return cached
        result = highlight_set(self.parent_index, node_id, self.max_highlight_hops)
        self._hover = (node_id, result)
        return result

    def stats(self, top_n: int = 3) -> RepoStats:
        return compute_stats(self.graph, top_n=top_n)

    # =========================================================================
    # Selection
    # =========================================================================

    @property
    def selected_id(self) -> Optional[str]:
        with self._lock:
            return self._selected_id

    @property
    def selection_links(self) -> Tuple[Link, ...]:
        with self._lock:
            return self._selection

    def select_file(self, node_id: str, source_text: str) -> List[Link]:
        """
        Replace the previous selection's dependency links with this file's.

        Call only after the source text was fetched successfully; a failed
        fetch must leave the session untouched.
        """
        node = self._require(node_id)
        links = []
        if node.is_file:
            targets = find_imports(source_text, self.graph.iter_nodes())
            links = dependency_links(node_id, targets)
            logger.debug(f"Selected '{node_id}': {len(links)} inferred dependencies")

        with self._lock:
            self._selection = tuple(links)
            self._selected_id = node_id
        return links

    def clear_selection(self) -> None:
        with self._lock:
            self._selection = ()
            self._selected_id = None

    # =========================================================================
    # Collaborator context
    # =========================================================================

    def folder_context(self, node_id: str) -> str:
        self._require(node_id)
        return folder_context(self.graph, node_id, max_paths=self.max_folder_context_paths)

    def file_context(self, node_id: str, source_text: str) -> str:
        self._require(node_id)
        return file_context(
            node_id,
            source_text,
            self.graph.file_paths(),
            max_chars=self.max_context_source_chars,
            max_paths=self.max_file_context_paths,
        )

    def _require(self, node_id: str) -> Node:
        node = self.graph.get_node(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node
