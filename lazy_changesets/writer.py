"""Confirming and persisting changesets."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

import click

from . import editor
from .commit import get_commit_functions
from .config import Config
from .content import format_confirmation_message
from .models import Changeset, ChangesetWithConfirmed, Package
from .prompts import Prompter
from .shell import info, log, success, warn
from .store import changeset_path

WriteChangeset = Callable[[Changeset, str], str]


class Vcs(Protocol):
    def add(self, path: str | Path, cwd: str | Path) -> None: ...

    def commit(self, message: str, cwd: str | Path) -> None: ...


def warn_if_major(changeset: Changeset) -> None:
    """Remind the author what a breaking change needs, or where the file is."""
    if any(r.type == "major" for r in changeset.releases):
        warn(
            "This Changeset includes a major change and we STRONGLY recommend "
            "adding more information to the changeset:"
        )
        warn("WHAT the breaking change is")
        warn("WHY the change was made")
        warn("HOW a consumer should update their code")
    else:
        success(
            "If you want to modify or expand on the changeset summary, "
            "you can find it here"
        )


def write_changeset_list(
    changesets: Sequence[ChangesetWithConfirmed],
    packages: Sequence[Package],
    cwd: str,
    config: Config,
    *,
    prompter: Prompter,
    write_changeset: WriteChangeset,
    vcs: Vcs,
    empty: bool = False,
    open_editor: bool = False,
) -> list[str]:
    """Confirm, write and optionally commit each changeset in order.

    Unconfirmed changesets are shown and the user is asked to accept them;
    a declined changeset is skipped and the loop moves on.

    Returns:
        Ids of the changesets that were written.
    """
    get_add_message, commit_options = get_commit_functions(config)
    prefix = "Empty " if empty else ""
    written: list[str] = []

    for changeset in changesets:
        log(format_confirmation_message(changeset, len(packages) > 1))

        confirmed = changeset.confirmed or prompter.ask_confirm(
            "Is this your desired changeset?"
        )
        if not confirmed:
            continue

        record = changeset.to_changeset()
        changeset_id = write_changeset(record, cwd)
        written.append(changeset_id)
        path = changeset_path(cwd, changeset_id).resolve()

        if get_add_message is not None:
            vcs.add(path, cwd)
            vcs.commit(get_add_message(record, commit_options), cwd)
            success(f"{prefix}Changeset added and committed")
        else:
            success(f"{prefix}Changeset added! - you can now commit it\n")

        warn_if_major(record)
        info(str(path))

        if open_editor:
            editor.launch_detached(path)

    return written
