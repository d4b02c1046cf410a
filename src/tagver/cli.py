"""CLI app definition: print the resolved version for the current checkout."""

from typing import Annotated

import typer

from tagver.errors import TagverError
from tagver.git_helpers import check_dependencies, describe_nearest_tag, find_repo_root
from tagver.resolver import OutputMode, resolve
from tagver.utils import print_error, print_version
from tagver.version_file import read_candidate_version, version_file_path


def compute_version(mode: OutputMode) -> str:
    """Gather the candidate and describe output for the checkout and resolve them."""
    check_dependencies()
    repo_root = find_repo_root()
    candidate = read_candidate_version(version_file_path(repo_root))
    describe_output = describe_nearest_tag(repo_root)
    return resolve(candidate, describe_output, mode)


app = typer.Typer(
    help="Derive a semantic or PEP 440 version from git tags and the VERSION file.",
    add_completion=False,
)


@app.command()
def main(
    pep440: Annotated[
        bool,
        typer.Option("--pep440", help="Emit a PEP 440 version instead of a semantic one."),
    ] = False,
) -> None:
    """Print the version of the current checkout."""
    mode = OutputMode.PEP440 if pep440 else OutputMode.SEMANTIC
    try:
        version = compute_version(mode)
    except TagverError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1)
    print_version(version)
