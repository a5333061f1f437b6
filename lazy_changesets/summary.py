"""Summary collection: console first, editor on an empty answer."""

from __future__ import annotations

import click

from .config import Config
from .errors import EditorError
from .prompts import Prompter
from .shell import log

EDITOR_PLACEHOLDER = (
    "\n\n# Please enter a summary for your changes.\n"
    "# An empty message aborts the editor."
)
RETRY_QUESTION = "\n\n# A summary is required for the changelog! 😪"


def collect_summary(prompter: Prompter, config: Config) -> tuple[str, bool]:
    """Ask for the changeset summary.

    A non-empty console answer is final but still needs the writer's
    explicit confirmation. A non-empty answer saved in the external editor
    counts as confirmed. If the editor fails or comes back empty, the
    console question is repeated until something is entered.

    Returns:
        (summary, confirmed) with summary never empty.
    """
    log("Please enter a summary for this change (this will be in the changelogs).")
    log(click.style("  (submit empty line to open external editor)", fg="bright_black"))

    summary = "" if config.always_open_editor else prompter.ask_question("Summary")
    if summary:
        return summary, False

    try:
        summary = prompter.ask_question_with_editor(EDITOR_PLACEHOLDER)
    except EditorError:
        log("An error happened using external editor. Please type your summary here:")
    else:
        if summary:
            return summary, True

    summary = prompter.ask_question("")
    while not summary:
        summary = prompter.ask_question(RETRY_QUESTION)
    return summary, False
