"""
CLI command modules.
"""

from . import context, deps, export, path, stats, tree

__all__ = ["context", "deps", "export", "path", "stats", "tree"]
