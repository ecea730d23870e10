"""
Path-to-root highlighting.

When the user hovers a node, the viewer emphasises the chain of folders
leading from it back to the root and dims everything else.
"""

import logging
from typing import Collection, FrozenSet, Iterable, List

from ..config import MAX_HIGHLIGHT_HOPS, ROOT_ID
from .parent_index import ParentIndex
from .types import Link

logger = logging.getLogger(__name__)


def path_to_root(
    parent_index: ParentIndex,
    node_id: str,
    max_hops: int = MAX_HIGHLIGHT_HOPS,
) -> List[str]:
    """
    Walk parent pointers from `node_id` up to the root.

    Stops at the root, at a node without a parent (detached: the partial
    chain is returned), at a repeated id, or after `max_hops` hops.

    Example:
        path_to_root(index, "src/utils/math.js")
        # ["src/utils/math.js", "src/utils", "src", "root"]
    """
    path: List[str] = []
    seen = set()
    current = node_id
    hops = 0

    while current is not None:
        if current in seen:
            logger.warning(f"Cycle in parent chain of '{node_id}' at '{current}'")
            break
        path.append(current)
        seen.add(current)
        if current == ROOT_ID:
            break
        if hops >= max_hops:
            logger.warning(f"Parent chain of '{node_id}' exceeds {max_hops} hops")
            break
        current = parent_index.parent_of(current)
        hops += 1

    return path


def highlight_set(
    parent_index: ParentIndex,
    node_id: str,
    max_hops: int = MAX_HIGHLIGHT_HOPS,
) -> FrozenSet[str]:
    """Unordered highlight set for a focal node."""
    return frozenset(path_to_root(parent_index, node_id, max_hops=max_hops))


def highlighted_links(links: Iterable[Link], highlight: Collection[str]) -> List[Link]:
    """Links whose endpoints both lie on the highlighted path."""
    return [
        link for link in links
        if link.source in highlight and link.target in highlight
    ]
