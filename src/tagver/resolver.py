"""Version resolution from a candidate version and git describe output.

Pure functions only: callers pass in the candidate version read from the
version file and the raw output of the describe query, and get back the
version string to publish.

A describe string has one of two shapes:

    v1.0.0-p1-2-gde2198c9   developing: tag, commits since tag, hash
    v1.0.0-p1               released: HEAD is exactly on the tag
"""

import enum
import re
from dataclasses import dataclass

from tagver.config import TAG_PREFIX
from tagver.errors import InvalidVersionError, NoMatchingTagError, StaleCandidateError

# Greedy tag group: the rightmost -<digits>-g<hex> is the delimiter, so a
# hyphenated pre-release inside the tag itself stays part of the tag.
_DESCRIBE_RE = re.compile(r"^(?P<tag>.+)-(?P<count>\d+)-(?P<hash>g[0-9a-f]+)$")


class OutputMode(enum.Enum):
    SEMANTIC = "semantic"
    PEP440 = "pep440"


@dataclass(frozen=True)
class DescribeResult:
    """Decomposed describe output. commit_hash keeps its 'g' prefix."""

    tag_version: str
    commit_count: int = 0
    commit_hash: str = ""

    @property
    def is_released(self) -> bool:
        return self.commit_count == 0


def _strip_prefix(tag: str) -> str:
    if tag.startswith(TAG_PREFIX):
        return tag[len(TAG_PREFIX):]
    return tag


def parse_describe(describe_output: str | None) -> DescribeResult:
    """Split describe output into tag version, commit count and hash.

    Raises NoMatchingTagError when there is no output at all, which is what
    the git collaborator hands back when no tag matches.
    """
    text = (describe_output or "").strip()
    if not text:
        raise NoMatchingTagError("no tag matching the release pattern was found")

    match = _DESCRIBE_RE.match(text)
    if match:
        tag_version = _strip_prefix(match.group("tag"))
        result = DescribeResult(
            tag_version=tag_version,
            commit_count=int(match.group("count")),
            commit_hash=match.group("hash"),
        )
    else:
        tag_version = _strip_prefix(text)
        result = DescribeResult(tag_version=tag_version)

    if not tag_version:
        raise NoMatchingTagError(f"describe output '{text}' does not name a tag")
    return result


def validate_version(version: str, source: str = "candidate") -> str:
    """Reject versions whose shape is ambiguous: empty, whitespace, or more than one hyphen.

    Returns the version unchanged so it can be used inline.
    """
    if not version:
        raise InvalidVersionError(f"{source} version is empty")
    if any(ch.isspace() for ch in version):
        raise InvalidVersionError(f"{source} version '{version}' contains whitespace")
    if version.count("-") > 1:
        raise InvalidVersionError(
            f"{source} version '{version}' has more than one pre-release hyphen"
        )
    return version


def format_development_version(base: str, commit_count: int, commit_hash: str, mode: OutputMode) -> str:
    """Format a version for a checkout that is commit_count commits past its tag.

    PEP 440:  1.0.1.dev2+gde2198c9
    Semantic: 1.0.1-2.gde2198c9, or 1.0.1-p1.2.gde2198c9 when base already
    carries a pre-release.
    """
    if mode is OutputMode.PEP440:
        return f"{base}.dev{commit_count}+{commit_hash}"
    if "-" in base:
        return f"{base}.{commit_count}.{commit_hash}"
    return f"{base}-{commit_count}.{commit_hash}"


def resolve(candidate_version: str, describe_output: str | None, mode: OutputMode = OutputMode.SEMANTIC) -> str:
    """Return the version string for a checkout.

    On a tag the tag version is returned as-is in both modes. Past a tag the
    candidate version is decorated with the commit count and hash; the
    candidate must differ from the tag, otherwise it was never bumped after
    the release and StaleCandidateError is raised. The candidate plays no part
    in a released version, so it is only validated past a tag.
    """
    described = parse_describe(describe_output)

    if described.is_released:
        return described.tag_version

    candidate = validate_version(candidate_version.strip(), "candidate")
    if candidate == described.tag_version:
        raise StaleCandidateError(
            f"candidate version {candidate} equals the last tag v{described.tag_version} "
            f"but {described.commit_count} commit(s) exist since; bump the version file"
        )
    validate_version(described.tag_version, "tag")

    return format_development_version(
        candidate, described.commit_count, described.commit_hash, mode
    )
