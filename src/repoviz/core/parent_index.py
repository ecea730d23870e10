"""
Parent lookup derived from structural links.

Built once per graph so path-to-root queries cost O(depth) instead of a
scan of the link list per hop. Collapse toggles never change structural
links, so the index survives them untouched.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional

from .types import Link, RepoGraph

logger = logging.getLogger(__name__)


class ParentIndex:
    """Maps node id -> structural parent id."""

    def __init__(self, parents: Optional[Dict[str, str]] = None):
        self._parents: Dict[str, str] = dict(parents or {})

    @classmethod
    def from_links(cls, links: Iterable[Link]) -> "ParentIndex":
        parents: Dict[str, str] = {}
        for link in links:
            if not link.is_structural:
                continue
            existing = parents.get(link.target)
            if existing is not None:
                if existing != link.source:
                    logger.warning(
                        f"'{link.target}' has several structural parents; "
                        f"keeping '{existing}', ignoring '{link.source}'"
                    )
                continue
            parents[link.target] = link.source
        return cls(parents)

    @classmethod
    def from_graph(cls, graph: RepoGraph) -> "ParentIndex":
        return cls.from_links(graph.links)

    def parent_of(self, node_id: str) -> Optional[str]:
        """Parent id, or None for the root and detached/unknown ids."""
        return self._parents.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parents)
