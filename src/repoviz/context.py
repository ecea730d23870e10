"""
Context handed to summarization and chat collaborators.

The collaborator receives plain text and returns free-form text; nothing
here depends on what it answers or whether it answers at all.
"""

from typing import List, Sequence

from .config import (
    MAX_CONTEXT_SOURCE_CHARS,
    MAX_FILE_CONTEXT_PATHS,
    MAX_FOLDER_CONTEXT_PATHS,
)
from .core.exceptions import NodeNotFoundError
from .core.types import RepoGraph


def child_file_names(graph: RepoGraph, folder_id: str) -> List[str]:
    """Names of the direct file children of a folder (or the root)."""
    node = graph.get_node(folder_id)
    if node is None:
        raise NodeNotFoundError(folder_id)
    names = []
    for child_id in node.child_links:
        child = graph.get_node(child_id)
        if child is not None and child.is_file:
            names.append(child.name)
    return names


def folder_context(
    graph: RepoGraph,
    folder_id: str,
    max_paths: int = MAX_FOLDER_CONTEXT_PATHS,
) -> str:
    """Folder name, its direct child files and the repository path list."""
    node = graph.get_node(folder_id)
    if node is None:
        raise NodeNotFoundError(folder_id)

    files = ", ".join(child_file_names(graph, folder_id)) or "(none)"
    project = "\n".join(graph.file_paths()[:max_paths])

    return (
        f"FOLDER: \"{node.name}\" (Files: {files})\n"
        f"CONTEXT:\n{project}\n"
    )


def file_context(
    path: str,
    source_text: str,
    all_paths: Sequence[str],
    max_chars: int = MAX_CONTEXT_SOURCE_CHARS,
    max_paths: int = MAX_FILE_CONTEXT_PATHS,
) -> str:
    """File path, its (truncated) source and the repository path list."""
    code = source_text
    if len(code) > max_chars:
        code = code[:max_chars] + "..."
    project = "\n".join(list(all_paths)[:max_paths])

    return (
        f"FILE: \"{path}\"\n"
        f"CONTEXT:\n{project}\n"
        f"CODE:\n{code}\n"
    )
