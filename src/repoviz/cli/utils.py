"""
CLI Utilities - Shared helper functions for command line operations.

This module provides formatted printing and the logic that turns a SOURCE
argument (a local directory, a saved descriptor listing, or a GitHub URL)
into a descriptor list plus a way to read file text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

import click

from ..config import Settings, load_settings
from ..core.exceptions import DescriptorLoadError, InvalidRepositoryURL
from ..core.result import Err, Result
from ..core.session import ExplorerSession
from ..sources.github import GitHubClient, is_github_url, parse_repo_url
from ..sources.local import load_descriptor_file, read_source, scan_directory


def echo_success(message: str) -> None:
    """Print a success message with a green checkmark."""
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """Print an error message with a red cross to stderr."""
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """Print an informational message, dimmed."""
    click.echo(click.style(f"   {message}", dim=True))


@dataclass
class LoadedRepository:
    """
    A resolved SOURCE argument.

    Attributes:
        label: Human-readable name of the source.
        descriptors: Flat listing for the graph builder.
        read_file: Fetches the text of one repository path.
    """
    label: str
    descriptors: List[Any]
    read_file: Callable[[str], Result[str, str]]


def _no_contents(path: str) -> Result[str, str]:
    return Err(f"File contents are not available from a descriptor listing: {path}")


def load_repository(source: str, settings: Optional[Settings] = None) -> Optional[LoadedRepository]:
    """
    Resolve SOURCE into descriptors and a file reader.

    Errors are reported to the user and yield None, so callers only need
    to check for a missing result.
    """
    settings = settings or load_settings()

    # Local paths win: a checkout may live under .../github.com/owner/repo
    path = Path(source)
    if path.is_dir():
        return LoadedRepository(
            label=str(path.resolve().name or path),
            descriptors=scan_directory(path),
            read_file=lambda rel: read_source(path, rel, max_bytes=settings.max_file_size_bytes),
        )

    if path.is_file():
        try:
            descriptors = load_descriptor_file(path)
        except DescriptorLoadError as e:
            echo_error(str(e))
            return None
        return LoadedRepository(label=path.name, descriptors=descriptors, read_file=_no_contents)

    if is_github_url(source):
        try:
            owner, repo = parse_repo_url(source)
        except InvalidRepositoryURL as e:
            echo_error(str(e))
            return None

        client = GitHubClient.from_settings(settings)
        result = client.fetch_tree(owner, repo)
        if result.is_err():
            echo_error(f"Could not fetch {owner}/{repo}: {result.error}")
            return None

        return LoadedRepository(
            label=f"{owner}/{repo}",
            descriptors=result.unwrap(),
            read_file=lambda rel: client.fetch_file_content(owner, repo, rel),
        )

    echo_error(f"Source not found: {source}")
    click.echo("Pass a directory, a descriptor JSON file, or a GitHub URL.")
    return None


def open_session(source: str) -> Optional[Tuple[LoadedRepository, ExplorerSession]]:
    """Load SOURCE and build a session. Returns (repository, session) or None."""
    settings = load_settings()
    repository = load_repository(source, settings)
    if repository is None:
        return None
    session = ExplorerSession.from_settings(repository.descriptors, settings)
    return repository, session
