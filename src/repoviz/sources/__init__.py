"""
Repository sources: where descriptor listings and file text come from.
"""

from .cache import FileContentCache
from .github import GitHubClient, is_github_url, parse_repo_url
from .local import load_descriptor_file, read_source, scan_directory

__all__ = [
    "FileContentCache",
    "GitHubClient",
    "is_github_url",
    "parse_repo_url",
    "load_descriptor_file",
    "read_source",
    "scan_directory",
]
