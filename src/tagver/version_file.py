"""Candidate version file lookup and reading."""

import os

from tagver.config import DEFAULT_VERSION_FILE, VERSION_FILE_ENV
from tagver.errors import MissingVersionFileError


def version_file_path(repo_root: str) -> str:
    """Return the version file path under repo_root, honoring TAGVER_VERSION_FILE."""
    name = os.environ.get(VERSION_FILE_ENV, "") or DEFAULT_VERSION_FILE
    return os.path.join(repo_root, name)


def read_candidate_version(path: str) -> str:
    """Read the candidate version, trimmed of surrounding whitespace."""
    if not os.path.isfile(path):
        raise MissingVersionFileError(f"version file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError as exc:
        raise MissingVersionFileError(f"cannot read version file {path}: {exc}") from exc
