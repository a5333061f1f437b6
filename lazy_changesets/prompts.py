"""Terminal prompts.

The add workflow only talks to a Prompter. ClickPrompter is the terminal
implementation; tests pass a mock with the same methods.
"""

from __future__ import annotations

import string
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, Union

import click

from .errors import EditorError


@dataclass(frozen=True)
class Choice:
    """One selectable entry. ``message`` is what gets displayed."""

    name: str
    message: str = ""

    @property
    def label(self) -> str:
        return self.message or self.name


@dataclass(frozen=True)
class ChoiceGroup:
    """A titled group of choices; selecting the group selects all of them."""

    name: str
    choices: list[Choice] = field(default_factory=list)


CheckboxOptions = Sequence[Union[Choice, ChoiceGroup]]
AnswerFormatter = Callable[[list[str]], str]


class Prompter(Protocol):
    def ask_confirm(self, question: str) -> bool: ...

    def ask_list(self, question: str, options: Sequence[str]) -> str: ...

    def ask_checkbox_plus(
        self,
        question: str,
        options: CheckboxOptions,
        format_answer: AnswerFormatter | None = None,
    ) -> list[str]: ...

    def ask_question(self, question: str) -> str: ...

    def ask_question_with_editor(self, placeholder: str) -> str: ...


def strip_comments(text: str) -> str:
    """Drop '#' comment lines and surrounding whitespace from editor text."""
    lines = [line for line in text.splitlines() if not line.lstrip().startswith("#")]
    return "\n".join(lines).strip()


def _group_keys(count: int) -> list[str]:
    return list(string.ascii_lowercase[:count])


class ClickPrompter:
    """Prompter backed by click.

    Checkbox questions are answered with space or comma separated tokens:
    item numbers select single entries, a group letter selects the whole
    group. An empty line selects nothing; callers decide whether that is
    acceptable.
    """

    def ask_confirm(self, question: str) -> bool:
        return click.confirm(click.style(question, bold=True), default=True)

    def ask_list(self, question: str, options: Sequence[str]) -> str:
        return click.prompt(
            click.style(question, bold=True),
            type=click.Choice(list(options)),
            default=options[0],
        )

    def ask_checkbox_plus(
        self,
        question: str,
        options: CheckboxOptions,
        format_answer: AnswerFormatter | None = None,
    ) -> list[str]:
        click.echo(click.style(question, bold=True))

        groups = [o for o in options if isinstance(o, ChoiceGroup)]
        loose = [o for o in options if isinstance(o, Choice)]
        by_token: dict[str, list[str]] = {}
        number = 1

        for key, group in zip(_group_keys(len(groups)), groups):
            click.echo(f"  [{key}] {click.style(group.name, underline=True)}")
            by_token[key] = [group.name] + [c.name for c in group.choices]
            for choice in group.choices:
                click.echo(f"      {number:>2}) {choice.label}")
                by_token[str(number)] = [choice.name]
                number += 1
        for choice in loose:
            click.echo(f"  {number:>2}) {choice.label}")
            by_token[str(number)] = [choice.name]
            number += 1

        while True:
            raw = click.prompt(
                "Select (numbers or group letters)", default="", show_default=False
            )
            tokens = raw.replace(",", " ").split()
            unknown = [t for t in tokens if t.lower() not in by_token]
            if not unknown:
                break
            click.echo(f"Unknown selection: {', '.join(unknown)}")

        selected: list[str] = []
        for token in tokens:
            for name in by_token[token.lower()]:
                if name not in selected:
                    selected.append(name)

        if format_answer is not None:
            click.echo(format_answer(selected))
        return selected

    def ask_question(self, question: str) -> str:
        text = click.prompt(
            click.style(question, bold=True) if question else "",
            default="",
            show_default=False,
            prompt_suffix=": " if question else "> ",
        )
        return text.strip()

    def ask_question_with_editor(self, placeholder: str) -> str:
        try:
            edited = click.edit(placeholder, extension=".md", require_save=True)
        except click.ClickException as exc:
            raise EditorError(exc.format_message()) from exc
        if edited is None:
            return ""
        return strip_comments(edited)
