"""Core utility functions: console output and command execution."""

import shutil
import subprocess

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print_version(version: str) -> None:
    """Print a version string to stdout exactly as-is."""
    console.print(version, highlight=False, markup=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print a diagnostic to stderr in red."""
    err_console.print(f"Error: {message}", style="red", highlight=False, markup=False, soft_wrap=True)


def check_command(name: str) -> bool:
    """Check if a command is available on PATH."""
    return shutil.which(name) is not None


def run_cmd(args: list[str], cwd: str | None = None) -> subprocess.CompletedProcess:
    """Run a command and capture its text output. Never raises on nonzero exit."""
    return subprocess.run(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        cwd=cwd,
    )
