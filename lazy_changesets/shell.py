"""Shell, git and console utilities.

Provides simple wrappers around subprocess calls for git operations, plus
the console output helpers used by every prompt step.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import click


def git(*args: str, cwd: str | Path | None = None, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "status", "--short").
        cwd: Directory to run git in. Defaults to the process cwd.
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., a missing
               base branch).

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=check
    )
    return result.stdout.strip()


def add(path: str | Path, cwd: str | Path) -> None:
    """Stage a single file."""
    git("add", str(path), cwd=cwd)


def commit(message: str, cwd: str | Path) -> None:
    """Commit whatever is staged with the given message."""
    git("commit", "-m", message, cwd=cwd)


def changed_files(base_branch: str, cwd: str | Path) -> list[str]:
    """List files changed on this branch relative to its base.

    Compares the working tree against the merge base, so committed, staged
    and unstaged edits all count, plus untracked files that aren't ignored.
    Returns an empty list if the base branch doesn't exist.
    """
    merge_base = git("merge-base", base_branch, "HEAD", cwd=cwd, check=False)
    if not merge_base:
        return []

    tracked = git("diff", "--name-only", merge_base, cwd=cwd, check=False)
    untracked = git("ls-files", "--others", "--exclude-standard", cwd=cwd, check=False)
    return list(dict.fromkeys(tracked.splitlines() + untracked.splitlines()))


def log(msg: str = "") -> None:
    click.echo(msg)


def info(msg: str) -> None:
    click.echo(click.style(msg, fg="blue"))


def success(msg: str) -> None:
    click.echo(click.style(msg, fg="green"))


def warn(msg: str) -> None:
    click.echo(click.style(f"warn {msg}", fg="yellow"), err=True)


def error(msg: str) -> None:
    click.echo(click.style(f"error {msg}", fg="red"), err=True)


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the command.
    """
    click.echo(f"ERROR: {msg}", err=True)
    sys.exit(1)
