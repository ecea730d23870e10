"""
Global Configuration and Safety Defaults.

This module centralizes the defaults shared by the graph core and its
collaborators: reserved ids, the extension sets used by the lexical
heuristics, the caps that bound traversal on malformed input, and the
limits applied to context handed to summarization collaborators.

User overrides live in `.repoviz/config.yaml` and are loaded through
`load_settings`.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Set, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

# --- Graph identity ---
ROOT_ID = "root"
ROOT_NAME = "Repository"

# --- Lexical heuristics ---
# Stylesheets linked to a sibling script with the same basename at build time
STYLESHEET_EXTENSIONS: Tuple[str, ...] = (".css", ".scss", ".sass", ".less")
SCRIPT_EXTENSIONS: Tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

# Stripped from the final segment of an import path before basename matching
IMPORT_EXTENSIONS: Tuple[str, ...] = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".mjs",
    ".cjs",
    ".css",
    ".scss",
    ".sass",
    ".less",
)

# --- Safety Limits ---
# Hop cap for path-to-root queries (cycle guard on corrupted input)
MAX_HIGHLIGHT_HOPS = 100

# Files larger than this are not read as source text
MAX_FILE_SIZE_BYTES = 500 * 1024

# --- Context limits (summarization collaborators) ---
MAX_CONTEXT_SOURCE_CHARS = 3000
MAX_FILE_CONTEXT_PATHS = 100
MAX_FOLDER_CONTEXT_PATHS = 200

# --- Remote sources ---
GITHUB_API_URL = "https://api.github.com"
HTTP_TIMEOUT_SECONDS = 30

# --- Blocklists ---
# Directories skipped by the local directory scanner
IGNORE_DIRECTORIES: Set[str] = {
    # Version Control
    ".git",
    ".svn",
    ".hg",
    # Environments & Dependencies
    ".venv",
    "venv",
    "node_modules",
    "site-packages",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
    # IDEs
    ".idea",
    ".vscode",
    # Repoviz internal
    ".repoviz",
}

DEFAULT_CONFIG_PATH = Path(".repoviz/config.yaml")


class Settings(BaseModel):
    """User-tunable settings, read from `.repoviz/config.yaml`."""
    github_token: Optional[str] = None
    github_api_url: str = GITHUB_API_URL
    http_timeout: float = HTTP_TIMEOUT_SECONDS
    max_highlight_hops: int = Field(default=MAX_HIGHLIGHT_HOPS, ge=1)
    max_file_size_bytes: int = Field(default=MAX_FILE_SIZE_BYTES, ge=0)
    max_context_source_chars: int = Field(default=MAX_CONTEXT_SOURCE_CHARS, ge=0)
    max_file_context_paths: int = Field(default=MAX_FILE_CONTEXT_PATHS, ge=0)
    max_folder_context_paths: int = Field(default=MAX_FOLDER_CONTEXT_PATHS, ge=0)


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML, falling back to defaults.

    A missing or unreadable file yields the defaults; the GitHub token is
    taken from REPOVIZ_GITHUB_TOKEN or GITHUB_TOKEN when the file does not
    set one.

    Args:
        config_path: Path to the YAML file. Defaults to `.repoviz/config.yaml`.

    Returns:
        Settings: The effective settings.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    data = {}

    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not read config '{path}': {e}")
            data = {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config '{path}': expected a mapping")
        data = {}

    try:
        settings = Settings(**data)
    except ValidationError as e:
        logger.warning(f"Invalid config '{path}', using defaults: {e}")
        settings = Settings()

    if not settings.github_token:
        token = os.getenv("REPOVIZ_GITHUB_TOKEN") or os.getenv("GITHUB_TOKEN")
        if token:
            settings = settings.model_copy(update={"github_token": token})

    return settings


def is_ignored_directory(dir_name: str) -> bool:
    """Check if directory name is in the blocklist."""
    return dir_name in IGNORE_DIRECTORIES
