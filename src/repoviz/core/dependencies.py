"""
Import-based dependency inference.

A best-effort lexical heuristic, not module resolution. Supported syntax:
- from "./path" / from './path'      (ES module import/export ... from)
- import "./path" / import './path'  (side-effect imports)

The last segment of each import path, minus a known extension, is matched
against file basenames anywhere in the repository and the first hit wins.
Unsupported syntax (require(), dynamic import()) is a known false negative;
files sharing a basename in unrelated folders are a known false positive.
"""

import logging
import re
from typing import Iterable, List, Optional

from ..config import IMPORT_EXTENSIONS
from .types import Link, LinkKind, Node

logger = logging.getLogger(__name__)

IMPORT_PATTERN = re.compile(
    r"""from\s+(['"])(?P<from_path>[^'"\n]+)\1"""
    r"""|import\s+(['"])(?P<import_path>[^'"\n]+)\3"""
)


def import_candidate(import_path: str) -> str:
    """
    Basename an import path is matched by.

    "./components/Button.jsx" -> "Button", "../utils/math" -> "math".
    """
    last = import_path.rstrip("/").rsplit("/", 1)[-1]
    for ext in IMPORT_EXTENSIONS:
        if last.endswith(ext):
            return last[: -len(ext)]
    return last


def extract_import_paths(source_text: str) -> List[str]:
    """Raw import paths in order of appearance."""
    paths = []
    for match in IMPORT_PATTERN.finditer(source_text):
        path = match.group("from_path") or match.group("import_path")
        if path:
            paths.append(path)
    return paths


def find_imports(source_text: str, nodes: Iterable[Node]) -> List[str]:
    """
    Infer the node ids a source file imports.

    Args:
        source_text: Text of the selected file.
        nodes: All graph nodes; only file nodes are candidates.

    Returns:
        List[str]: Matched ids, first occurrence order, no duplicates.
        Empty when nothing recognizable is imported.
    """
    if not source_text:
        return []

    files = [node for node in nodes if node.is_file]
    targets: List[str] = []

    for import_path in extract_import_paths(source_text):
        candidate = import_candidate(import_path)
        if not candidate:
            continue
        target = _first_match(candidate, files)
        if target is None:
            logger.debug(f"No file matches import '{import_path}'")
            continue
        if target not in targets:
            targets.append(target)

    return targets


def dependency_links(source_id: str, target_ids: Iterable[str]) -> List[Link]:
    """Dependency links from a selected file to its inferred imports."""
    return [
        Link(source=source_id, target=target_id, kind=LinkKind.DEPENDENCY)
        for target_id in target_ids
        if target_id != source_id
    ]


def _first_match(candidate: str, files: List[Node]) -> Optional[str]:
    for node in files:
        if node.basename == candidate:
            return node.id
    return None
