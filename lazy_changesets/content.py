"""Rendering changesets to Markdown.

A changeset file is a front-matter block of releases, optional change type
bullets, a blank line and the summary:

    ---
    "pkg-a": minor
    ---
    - [ Added ] New --dry-run flag

    Add a dry-run mode to the release command.
"""

from __future__ import annotations

from collections.abc import Sequence

import click

from .bumps import group_by_bump_type
from .models import Changeset, ChangeType, Release


def _releases_section(releases: Sequence[Release]) -> str:
    lines = "".join(f'"{r.name}": {r.type}\n' for r in releases)
    return f"---\n{lines}---\n"


def _unique_change_types(releases: Sequence[Release]) -> list[ChangeType]:
    seen: set[tuple[str, str]] = set()
    unique: list[ChangeType] = []
    for release in releases:
        for change_type in release.change_types or []:
            key = (change_type.title, change_type.description)
            if key not in seen:
                seen.add(key)
                unique.append(change_type)
    return unique


def _change_types_section(releases: Sequence[Release]) -> str:
    return "".join(
        f"- [ {ct.title} ] {ct.description}\n"
        for ct in _unique_change_types(releases)
        if ct.description
    )


def _section(releases: Sequence[Release]) -> str:
    return _releases_section(releases) + _change_types_section(releases)


def get_changeset_content(
    releases: Sequence[Release],
    summary: str,
    split_releases_by_bump_type: bool = False,
) -> str | None:
    """Render releases with their change types, or None if none carry any.

    With ``split_releases_by_bump_type`` each non-empty bump group gets its
    own front-matter block and bullets, most severe first. The summary
    always comes last, once.
    """
    if not any(r.change_types is not None for r in releases):
        return None

    if split_releases_by_bump_type:
        sections = [
            _section(group) for _, group in group_by_bump_type(releases).items() if group
        ]
    else:
        sections = [_section(releases)]

    return "\n".join(sections) + f"\n{summary}\n"


def format_changeset(changeset: Changeset) -> str:
    """Summary-only format used when no release has change types."""
    return f"{_releases_section(changeset.releases)}\n{changeset.summary}\n"


def format_confirmation_message(
    changeset: Changeset, repo_has_multiple_packages: bool
) -> str:
    """Overview shown before asking the user to confirm a changeset."""
    lines = ["", "=== Summary of changesets ==="]
    for bump, group in group_by_bump_type(changeset.releases).items():
        if group:
            names = ", ".join(r.name for r in group)
            lines.append(f"{click.style(bump, bold=True)}:  {names}")

    if repo_has_multiple_packages:
        lines.append("")
        lines.append(
            "Note: All dependents of these packages that will be incompatible with "
            "the new version will be "
            f"{click.style('patch bumped', fg='red')} when this changeset is applied."
        )
    lines.append("")
    return "\n".join(lines)
