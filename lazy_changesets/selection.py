"""Release selection: which packages get which bump.

Single-package repos get one list question. Multi-package repos first pick
the packages to include, then walk the bump types from most to least
severe, each step offering only the packages not yet classified.
"""

from __future__ import annotations

from collections.abc import Sequence

import click

from .bumps import BUMP_TYPES
from .errors import ExitError
from .models import Package, Release
from .prompts import Choice, ChoiceGroup, Prompter
from .shell import error, log
from .versions import is_initial_development

CHANGED_GROUP = "changed packages"
UNCHANGED_GROUP = "unchanged packages"
ALL_GROUP = "all packages"

_BUMP_COLORS = {"major": "red", "minor": "green", "patch": "blue", "none": "white"}


def format_pkg_name_and_version(name: str, version: str) -> str:
    return f"{click.style(name, bold=True)}@{click.style(version, bold=True)}"


def _format_selection(group_names: set[str]):
    def format_answer(selected: list[str]) -> str:
        return ", ".join(
            click.style(name, fg="cyan") for name in selected if name not in group_names
        )

    return format_answer


def confirm_major_release(prompter: Prompter, package: Package) -> bool:
    """Confirm a major bump; only asked while the package is below 1.0.0."""
    if not is_initial_development(package.version):
        return True

    log(
        click.style(
            f"WARNING: Releasing a major version for {package.name} will be its "
            "first major release.",
            fg="yellow",
        )
    )
    log(
        click.style(
            "If you are unsure if this is correct, contact the package's "
            "maintainers before committing this changeset.",
            fg="yellow",
        )
    )
    return prompter.ask_confirm(
        f"Are you sure you want to release the first major version of {package.name}?"
    )


def get_packages_to_release(
    prompter: Prompter, changed: Sequence[str], packages: Sequence[Package]
) -> list[str]:
    """Ask which packages to include, re-asking until at least one is picked."""
    unchanged = [p.name for p in packages if p.name not in changed]
    groups = [
        ChoiceGroup(name=CHANGED_GROUP, choices=[Choice(name) for name in changed]),
        ChoiceGroup(name=UNCHANGED_GROUP, choices=[Choice(name) for name in unchanged]),
    ]
    groups = [g for g in groups if g.choices]
    group_names = {CHANGED_GROUP, UNCHANGED_GROUP}

    def ask() -> list[str]:
        selected = prompter.ask_checkbox_plus(
            "Which packages would you like to include?",
            groups,
            _format_selection(group_names),
        )
        return [name for name in selected if name not in group_names]

    selected = ask()
    while not selected:
        error("You must select at least one package to release")
        error("(You most likely hit enter instead of space!)")
        selected = ask()
    return selected


def choose_packages_for_bump_type(
    prompter: Prompter,
    bump_type: str,
    names: Sequence[str],
    packages_by_name: dict[str, Package],
) -> list[str]:
    choices = [
        Choice(name, format_pkg_name_and_version(name, packages_by_name[name].version))
        for name in names
    ]
    title = click.style(bump_type, fg=_BUMP_COLORS[bump_type])
    selected = prompter.ask_checkbox_plus(
        f"Which packages should have a {title} bump?",
        [ChoiceGroup(name=ALL_GROUP, choices=choices)],
        _format_selection({ALL_GROUP}),
    )
    return [name for name in selected if name != ALL_GROUP]


def _select_single(prompter: Prompter, package: Package) -> Release:
    bump = prompter.ask_list(
        f"What kind of change is this for {click.style(package.name, fg='green')}? "
        f"(current version is {package.version})",
        ["patch", "minor", "major"],
    )
    if bump == "major" and not confirm_major_release(prompter, package):
        raise ExitError(1)
    return Release(name=package.name, type=bump)


def _select_multiple(
    prompter: Prompter, changed: Sequence[str], packages: Sequence[Package]
) -> list[Release]:
    packages_by_name = {p.name: p for p in packages}
    to_release = get_packages_to_release(prompter, changed, packages)
    # Insertion-ordered "set" of names still waiting for a bump type
    remaining = dict.fromkeys(to_release)
    releases: list[Release] = []

    for i, bump in enumerate(BUMP_TYPES):
        names = list(remaining)
        if not names:
            break

        if i == len(BUMP_TYPES) - 1:
            log(f"The following packages will be {bump} bumped:")
            for name in names:
                log(format_pkg_name_and_version(name, packages_by_name[name].version))
            picked = names
        else:
            picked = choose_packages_for_bump_type(
                prompter, bump, names, packages_by_name
            )

        for name in picked:
            if bump == "major" and not confirm_major_release(
                prompter, packages_by_name[name]
            ):
                # Stays unclassified and is offered again at the next step
                continue
            del remaining[name]
            releases.append(Release(name=name, type=bump))

    return releases


def select_releases(
    prompter: Prompter, changed: Sequence[str], packages: Sequence[Package]
) -> list[Release]:
    """Run the release selection questions.

    Args:
        prompter: Where questions go.
        changed: Names of packages with detected changes.
        packages: Every package in the workspace.

    Returns:
        One Release per included package.

    Raises:
        ExitError: The only package was set to major and the user declined
                   its first major release.
    """
    if len(packages) == 1:
        return [_select_single(prompter, packages[0])]
    return _select_multiple(prompter, changed, packages)
