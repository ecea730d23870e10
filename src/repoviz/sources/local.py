"""
Local directory source.

Produces the same flat descriptor listing GitHub returns, from a checkout
on disk, and reads file text for dependency inference.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from ..config import MAX_FILE_SIZE_BYTES, is_ignored_directory
from ..core.exceptions import DescriptorLoadError
from ..core.result import Err, Ok, Result
from ..core.types import DescriptorType, FileDescriptor

logger = logging.getLogger(__name__)


def scan_directory(root: Path) -> List[FileDescriptor]:
    """
    Walk `root` into descriptors with POSIX repository-relative paths.

    Ignored directories (VCS metadata, virtualenvs, node_modules, caches)
    are pruned during the walk. Entries are sorted for stable output.
    """
    root = Path(root).resolve()
    descriptors: List[FileDescriptor] = []

    for current, dirs, files in os.walk(root):
        # In-place pruning keeps os.walk out of ignored trees
        dirs[:] = sorted(d for d in dirs if not is_ignored_directory(d))
        rel_dir = Path(current).relative_to(root)

        for dir_name in dirs:
            descriptors.append(
                FileDescriptor(path=(rel_dir / dir_name).as_posix(), type=DescriptorType.TREE)
            )

        for file_name in sorted(files):
            full_path = Path(current) / file_name
            try:
                size = full_path.stat().st_size
            except OSError as e:
                logger.debug(f"Cannot stat {full_path}: {e}")
                size = None
            descriptors.append(
                FileDescriptor(
                    path=(rel_dir / file_name).as_posix(),
                    type=DescriptorType.BLOB,
                    size=size,
                )
            )

    logger.info(f"Scanned {len(descriptors)} entries under {root}")
    return descriptors


def read_source(root: Path, path: str, max_bytes: int = MAX_FILE_SIZE_BYTES) -> Result[str, str]:
    """
    Read a repository file as text.

    Refuses paths that escape `root` and files over `max_bytes`; undecodable
    bytes are replaced rather than failing the read.
    """
    root = Path(root).resolve()
    target = (root / path).resolve()

    if not target.is_relative_to(root):
        return Err(f"Path escapes repository root: {path}")
    if not target.is_file():
        return Err(f"Not a file: {path}")

    try:
        size = target.stat().st_size
        if size > max_bytes:
            return Err(f"File too large ({size} bytes): {path}")
        return Ok(target.read_text(encoding="utf-8", errors="replace"))
    except OSError as e:
        return Err(f"Could not read {path}: {e}")


def load_descriptor_file(path: Path) -> List[Dict[str, Any]]:
    """
    Load a descriptor listing saved as JSON.

    Accepts either a plain list of entries or a git trees API response
    (an object with a "tree" list). Entries are validated by the builder,
    which skips malformed ones.
    """
    try:
        data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise DescriptorLoadError(str(path), str(e)) from e

    if isinstance(data, dict):
        data = data.get("tree")
    if not isinstance(data, list):
        raise DescriptorLoadError(str(path), "expected a list of entries or an object with 'tree'")

    descriptors = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        if entry.get("type", DescriptorType.BLOB) not in (DescriptorType.BLOB, DescriptorType.TREE):
            continue
        descriptors.append(entry)

    return descriptors
