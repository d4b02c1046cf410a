"""Git operation helpers: dependency check, repo root lookup, tag describe."""

from tagver.config import ABBREV_LENGTH, REQUIRED_COMMANDS, TAG_PATTERN
from tagver.errors import MissingDependencyError, NoMatchingTagError, NotARepositoryError
from tagver.utils import check_command, run_cmd


def check_dependencies(commands: tuple[str, ...] = REQUIRED_COMMANDS) -> None:
    """Raise MissingDependencyError naming every required command not on PATH."""
    missing = [name for name in commands if not check_command(name)]
    if missing:
        raise MissingDependencyError(
            f"required command(s) not found on PATH: {', '.join(missing)}"
        )


def find_repo_root(cwd: str | None = None) -> str:
    """Return the top-level directory of the checkout containing cwd."""
    result = run_cmd(["git", "rev-parse", "--show-toplevel"], cwd=cwd)
    root = result.stdout.strip() if result.returncode == 0 else ""
    if not root:
        detail = result.stderr.strip() or "git rev-parse failed"
        raise NotARepositoryError(f"not inside a git repository ({detail})")
    return root


def build_describe_args() -> list[str]:
    """Return the git describe command for the nearest release tag.

    Pure function: kept separate so the exact query is testable.
    """
    return [
        "git", "describe", "--tags",
        "--match", TAG_PATTERN,
        f"--abbrev={ABBREV_LENGTH}",
    ]


def describe_nearest_tag(repo_root: str | None = None) -> str | None:
    """Describe HEAD relative to the nearest matching tag.

    Returns output like 'v1.0.0-2-gde2198c91' or 'v1.0.0', or None when git
    succeeds with empty output. A failing describe raises NoMatchingTagError
    carrying git's own message.
    """
    result = run_cmd(build_describe_args(), cwd=repo_root)
    if result.returncode != 0:
        detail = result.stderr.strip() or f"git describe exited with {result.returncode}"
        raise NoMatchingTagError(f"no tag matching {TAG_PATTERN} could be described ({detail})")
    return result.stdout.strip() or None
