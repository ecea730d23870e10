"""
Repository statistics shown alongside the graph.
"""

from collections import Counter
from typing import List, Tuple

from pydantic import BaseModel, Field

from .types import NodeGroup, RepoGraph


class RepoStats(BaseModel):
    total_nodes: int = 0
    folder_count: int = 0
    file_count: int = 0
    max_depth: int = 0
    total_bytes: int = 0
    top_extensions: List[Tuple[str, int]] = Field(default_factory=list)


def compute_stats(graph: RepoGraph, top_n: int = 3) -> RepoStats:
    """
    Summarize a graph. The root is not counted as a node.

    Extensions are ranked by file count, ties broken by name; files without
    an extension are not ranked.
    """
    folders = 0
    files = 0
    max_depth = 0
    total_bytes = 0
    extensions: Counter = Counter()

    for node in graph.iter_nodes():
        if node.group == NodeGroup.ROOT:
            continue
        max_depth = max(max_depth, node.depth)
        if node.group == NodeGroup.FOLDER:
            folders += 1
            continue
        files += 1
        total_bytes += node.size or 0
        if node.extension:
            extensions[node.extension] += 1

    ranked = sorted(extensions.items(), key=lambda item: (-item[1], item[0]))

    return RepoStats(
        total_nodes=folders + files,
        folder_count=folders,
        file_count=files,
        max_depth=max_depth,
        total_bytes=total_bytes,
        top_extensions=ranked[:top_n],
    )
