"""
GitHub source.

Fetches the recursive file listing and raw file contents of a public (or
token-authorized) GitHub repository over the REST API.

Failures are returned as `Err` values with a readable reason; nothing here
raises into the graph core, so a failed fetch leaves any session untouched.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests

from ..config import GITHUB_API_URL, HTTP_TIMEOUT_SECONDS, Settings
from ..core.exceptions import InvalidRepositoryURL
from ..core.result import Err, Ok, Result
from ..core.types import DescriptorType, FileDescriptor
from .cache import FileContentCache

logger = logging.getLogger(__name__)

REPO_URL_PATTERN = re.compile(r"github\.com[/:]([^/\s]+)/([^/\s#?]+)")


def parse_repo_url(url: str) -> Tuple[str, str]:
    """
    Split a GitHub URL into (owner, repo).

    Accepts https and ssh forms, with or without a trailing ".git" or path:
        https://github.com/facebook/react          -> ("facebook", "react")
        git@github.com:facebook/react.git          -> ("facebook", "react")
        https://github.com/facebook/react/tree/main -> ("facebook", "react")
    """
    match = REPO_URL_PATTERN.search(url or "")
    if not match:
        raise InvalidRepositoryURL(url)
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo:
        raise InvalidRepositoryURL(url)
    return owner, repo


def is_github_url(value: str) -> bool:
    return bool(REPO_URL_PATTERN.search(value or ""))


def tree_to_descriptors(entries: List[Dict[str, Any]]) -> List[FileDescriptor]:
    """
    Convert git tree entries to descriptors.

    Submodules (type "commit") are dropped; they have no content to show.
    """
    descriptors = []
    for entry in entries:
        entry_type = entry.get("type")
        if entry_type not in (DescriptorType.BLOB, DescriptorType.TREE):
            continue
        descriptors.append(
            FileDescriptor(
                path=entry.get("path"),
                type=DescriptorType(entry_type),
                size=entry.get("size"),
            )
        )
    return descriptors


class GitHubClient:
    """
    Minimal GitHub REST client for repository listings and file text.

    Attributes:
        api_url: Base API URL (overridable for GitHub Enterprise).
        cache: Memoizes fetched file contents by (owner, repo, ref, path).
            Cleared whenever a different repository is listed.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        api_url: str = GITHUB_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        cache: Optional[FileContentCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.cache = cache or FileContentCache()
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/vnd.github+json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})
        self._listed: Optional[Tuple[str, str, str]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "GitHubClient":
        return cls(
            token=settings.github_token,
            api_url=settings.github_api_url,
            timeout=settings.http_timeout,
        )

    def fetch_tree(self, owner: str, repo: str, ref: str = "HEAD") -> Result[List[FileDescriptor], str]:
        """Fetch the full recursive listing of a repository at `ref`."""
        url = f"{self.api_url}/repos/{owner}/{repo}/git/trees/{ref}"
        try:
            resp = self._session.get(url, params={"recursive": "1"}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GitHub API error for {owner}/{repo}: {e}")
            return Err(f"Request failed: {e}")

        if not resp.ok:
            return Err(_describe_failure(resp, f"{owner}/{repo}"))

        try:
            data = resp.json()
        except ValueError as e:
            return Err(f"Malformed response from GitHub: {e}")

        if data.get("truncated"):
            logger.warning(f"GitHub truncated the listing of {owner}/{repo}; the graph is partial")

        if self._listed != (owner, repo, ref):
            self.cache.reset()
            self._listed = (owner, repo, ref)

        descriptors = tree_to_descriptors(data.get("tree", []))
        logger.info(f"Fetched {len(descriptors)} entries from {owner}/{repo}")
        return Ok(descriptors)

    def fetch_file_content(self, owner: str, repo: str, path: str, ref: str = "HEAD") -> Result[str, str]:
        """Fetch the raw text of one file, served from the cache when known."""
        cache_key = f"{owner}/{repo}/{ref}:{path}"
        if self.cache.has(cache_key):
            logger.debug(f"Serving {path} from cache")
            return Ok(self.cache.get(cache_key))

        url = f"{self.api_url}/repos/{owner}/{repo}/contents/{quote(path)}"
        try:
            resp = self._session.get(
                url,
                params={"ref": ref},
                headers={"Accept": "application/vnd.github.raw"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"GitHub API error for {path}: {e}")
            return Err(f"Request failed: {e}")

        if not resp.ok:
            return Err(_describe_failure(resp, path))

        content = resp.text
        self.cache.set(cache_key, content)
        return Ok(content)


def _describe_failure(resp: requests.Response, subject: str) -> str:
    if resp.status_code == 404:
        return f"Not found: {subject}"
    if resp.status_code in (401, 403):
        return f"Access denied for {subject} (HTTP {resp.status_code}); check your GitHub token"
    return f"GitHub returned HTTP {resp.status_code} for {subject}"
