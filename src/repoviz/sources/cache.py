"""
In-memory file content cache.

Holds source text fetched for one analyzed repository so re-selecting a
file does not hit the network again. Reset it when a new repository is
analyzed.
"""

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class FileContentCache:
    """Thread-safe path -> source text map."""

    def __init__(self):
        self._contents: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[str]:
        with self._lock:
            return self._contents.get(path)

    def set(self, path: str, content: str) -> None:
        with self._lock:
            self._contents[path] = content

    def has(self, path: str) -> bool:
        with self._lock:
            return path in self._contents

    def reset(self) -> None:
        with self._lock:
            self._contents.clear()
        logger.debug("File content cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._contents)
