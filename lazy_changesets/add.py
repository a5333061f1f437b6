"""The add workflow: from package selection to written changesets."""

from __future__ import annotations

from pathlib import Path

from . import shell
from .change_types import build_changeset_list, choose_change_types, collect_summaries
from .config import Config
from .models import ChangesetWithConfirmed, Package
from .prompts import Prompter
from .selection import select_releases
from .store import write_changeset
from .summary import collect_summary
from .workspace import discover_packages, get_changed_packages
from .writer import Vcs, WriteChangeset, write_changeset_list


def create_changesets(
    prompter: Prompter,
    config: Config,
    changed: list[str],
    packages: list[Package],
) -> list[ChangesetWithConfirmed]:
    """Ask every question and return the changesets awaiting confirmation."""
    releases = select_releases(prompter, changed, packages)

    selection = choose_change_types(prompter, config)
    if selection is not None:
        drafts = build_changeset_list(prompter, selection, releases)
        return collect_summaries(prompter, drafts, config).changesets

    summary, confirmed = collect_summary(prompter, config)
    return [
        ChangesetWithConfirmed(releases=releases, summary=summary, confirmed=confirmed)
    ]


def add_changeset(
    cwd: Path,
    config: Config,
    prompter: Prompter,
    *,
    empty: bool = False,
    open_editor: bool = False,
    write: WriteChangeset = write_changeset,
    vcs: Vcs = shell,
) -> list[str]:
    """Run the add command in ``cwd``.

    With ``empty`` no questions are asked and a single empty, confirmed
    changeset is written.

    Returns:
        Ids of the written changesets.

    Raises:
        ExitError: The user declined a single package's first major release.
    """
    packages = discover_packages(cwd)
    if not packages:
        shell.fatal("No packages found in the workspace.")

    if empty:
        changesets = [ChangesetWithConfirmed(releases=[], summary="", confirmed=True)]
    else:
        changed = get_changed_packages(packages, cwd, config.base_branch)
        changesets = create_changesets(prompter, config, changed, packages)

    return write_changeset_list(
        changesets,
        packages,
        str(cwd),
        config,
        prompter=prompter,
        write_changeset=write,
        vcs=vcs,
        empty=empty,
        open_editor=open_editor,
    )
