"""Categorized change descriptions.

Collection runs as a chain of stages. Each stage takes the record the
previous one returned, so they can only be called in order:

    selection = choose_change_types(prompter, config)      # None: inactive
    drafts = build_changeset_list(prompter, selection, releases)
    done = collect_summaries(prompter, drafts, config)
    done.changesets
"""

from __future__ import annotations

from collections.abc import Sequence

import click
from pydantic import BaseModel

from .config import Config
from .errors import PreconditionError
from .models import ChangeCategory, ChangesetWithConfirmed, ChangeType, Release
from .prompts import Choice, Prompter
from .shell import log
from .summary import collect_summary

# category title -> last description entered for it
PreviousAnswers = dict[str, str]

SAME_MESSAGE_QUESTION = (
    "Would you like to reuse the same message for all packages of this bump type?"
)


class ChangeTypeSelection(BaseModel):
    """Categories the user checked; never empty."""

    categories: list[ChangeCategory]


class ChangesetDrafts(BaseModel):
    """Changesets with annotated releases, summaries still missing.

    One changeset holding every release when descriptions were shared per
    bump type, otherwise one changeset per release.
    """

    changesets: list[ChangesetWithConfirmed]


class SummarizedChangesets(BaseModel):
    """Drafts whose summaries have been collected; ready for the writer."""

    changesets: list[ChangesetWithConfirmed]


def choose_change_types(
    prompter: Prompter, config: Config
) -> ChangeTypeSelection | None:
    """Ask which kinds of change apply.

    Returns None when change types are disabled in the config or the user
    checked nothing.
    """
    if not config.should_ask_for_change_types:
        return None

    by_title = {c.title: c for c in config.change_types}
    choices = [
        Choice(c.title, f"{c.title} ({c.text})" if c.text else c.title)
        for c in config.change_types
    ]
    chosen = prompter.ask_checkbox_plus(
        click.style(
            "What kind of change are you making? (check all that apply)", bold=True
        ),
        choices,
        lambda titles: ", ".join(click.style(t, fg="cyan") for t in titles),
    )
    categories = [by_title[title] for title in chosen if title in by_title]
    if not categories:
        return None
    return ChangeTypeSelection(categories=categories)


def _ask_description(prompter: Prompter, category: ChangeCategory) -> str:
    return prompter.ask_question(f"[ {category.title} ]")


def get_description_with_previous(
    prompter: Prompter, previous_answers: PreviousAnswers, category: ChangeCategory
) -> str:
    """Offer the last answer for this category, else ask and remember a new one."""
    previous = previous_answers.get(category.title)
    if previous and prompter.ask_confirm(
        "Do you want to reuse your previous answer for the current package? "
        f"({previous})"
    ):
        return previous

    description = _ask_description(prompter, category)
    previous_answers[category.title] = description
    return description


def collect_per_bump_type(
    prompter: Prompter,
    releases: Sequence[Release],
    categories: Sequence[ChangeCategory],
) -> list[Release]:
    """One description per category for each bump type present.

    Every release of a bump type gets the same change type list. Bump types
    are visited in order of first appearance; the result is grouped the
    same way.
    """
    annotated: list[Release] = []
    for bump in dict.fromkeys(r.type for r in releases):
        group = [r for r in releases if r.type == bump]
        log(
            f"{click.style(f'{bump} :', fg='yellow')} "
            f"{click.style(', '.join(r.name for r in group), fg='cyan')}"
        )
        change_types = [
            ChangeType(category=category, description=_ask_description(prompter, category))
            for category in categories
        ]
        annotated.extend(
            r.model_copy(update={"change_types": change_types}) for r in group
        )
    return annotated


def collect_per_package(
    prompter: Prompter,
    releases: Sequence[Release],
    categories: Sequence[ChangeCategory],
    previous_answers: PreviousAnswers,
) -> list[ChangesetWithConfirmed]:
    """One changeset per release, each with its own descriptions.

    ``previous_answers`` is updated in place with every fresh answer.
    """
    changesets: list[ChangesetWithConfirmed] = []
    for release in releases:
        log(
            f"{click.style(f'{release.type} :', fg='yellow')} "
            f"{click.style(release.name, fg='cyan')}"
        )
        change_types = [
            ChangeType(
                category=category,
                description=get_description_with_previous(
                    prompter, previous_answers, category
                ),
            )
            for category in categories
        ]
        changesets.append(
            ChangesetWithConfirmed(
                releases=[release.model_copy(update={"change_types": change_types})]
            )
        )
    return changesets


def build_changeset_list(
    prompter: Prompter,
    selection: ChangeTypeSelection,
    releases: Sequence[Release],
) -> ChangesetDrafts:
    """Annotate releases with descriptions, grouped as the user prefers."""
    if not releases or not selection.categories:
        raise PreconditionError("releases and chosen change types must be set")

    if prompter.ask_confirm(SAME_MESSAGE_QUESTION):
        annotated = collect_per_bump_type(prompter, releases, selection.categories)
        return ChangesetDrafts(
            changesets=[ChangesetWithConfirmed(releases=annotated)]
        )

    return ChangesetDrafts(
        changesets=collect_per_package(prompter, releases, selection.categories, {})
    )


def collect_summaries(
    prompter: Prompter, drafts: ChangesetDrafts, config: Config
) -> SummarizedChangesets:
    """Ask for a summary for each draft, in order."""
    if not drafts.changesets:
        raise PreconditionError("changeset list must be set")

    changesets: list[ChangesetWithConfirmed] = []
    for draft in drafts.changesets:
        summary, confirmed = collect_summary(prompter, config)
        changesets.append(
            draft.model_copy(update={"summary": summary, "confirmed": confirmed})
        )
    return SummarizedChangesets(changesets=changesets)
