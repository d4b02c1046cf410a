"""Configuration constants for version resolution.

Values that mirror the git query (tag pattern, hash length) live here so the
collaborator and the tests agree on them.
"""

# Only tags that look like releases: v1.2.3, v1.0.0-p1, ...
TAG_PATTERN = "v[0-9]*"
TAG_PREFIX = "v"

# Length of the abbreviated commit hash in describe output (excluding the "g").
ABBREV_LENGTH = 9

DEFAULT_VERSION_FILE = "VERSION"

# Overrides DEFAULT_VERSION_FILE; resolved relative to the repository root.
VERSION_FILE_ENV = "TAGVER_VERSION_FILE"

# External tools that must be on PATH before anything runs.
REQUIRED_COMMANDS = ("git",)
