"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import click
import pytest

from lazy_changesets.models import Package
from lazy_changesets.prompts import ClickPrompter


def make_prompter(
    *,
    checkboxes: list[list[str]] | None = None,
    questions: list[str] | None = None,
    confirms: dict[str, bool] | None = None,
    lists: list[str] | None = None,
    editor: list[str] | Exception | None = None,
) -> MagicMock:
    """Build a scripted Prompter.

    Checkbox, question, list and editor answers are consumed in order.
    Confirm answers are looked up by the question text up to and including
    its first "?", so hints in parentheses don't matter. Running out of
    answers raises, which catches unexpected questions.
    """
    prompter = MagicMock(spec=ClickPrompter)
    prompter.ask_checkbox_plus.side_effect = list(checkboxes or [])
    prompter.ask_question.side_effect = list(questions or [])
    prompter.ask_list.side_effect = list(lists or [])
    if isinstance(editor, Exception):
        prompter.ask_question_with_editor.side_effect = editor
    else:
        prompter.ask_question_with_editor.side_effect = list(editor or [])

    answers = dict(confirms or {})

    def ask_confirm(question: str) -> bool:
        key = click.unstyle(question)
        key = key[: key.index("?") + 1]
        if key not in answers:
            raise AssertionError(f"No answer for confirm: {key}")
        return answers[key]

    prompter.ask_confirm.side_effect = ask_confirm
    return prompter


@pytest.fixture
def prompter_factory() -> Callable[..., MagicMock]:
    return make_prompter


@pytest.fixture
def two_packages() -> list[Package]:
    return [
        Package(name="pkg-a", version="1.0.0", path="packages/pkg-a"),
        Package(name="pkg-b", version="1.0.0", path="packages/pkg-b"),
    ]


def _write_package(root: Path, name: str, version: str) -> None:
    package_dir = root / "packages" / name
    package_dir.mkdir(parents=True)
    (package_dir / "pyproject.toml").write_text(
        f'[project]\nname = "{name}"\nversion = "{version}"\n'
    )


@pytest.fixture
def workspace(tmp_path: Path) -> Callable[..., Path]:
    """Create a uv workspace with the given {name: version} packages."""

    def create(packages: dict[str, str], tool: str = "") -> Path:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.uv.workspace]\nmembers = ["packages/*"]\n' + tool
        )
        for name, version in packages.items():
            _write_package(tmp_path, name, version)
        return tmp_path

    return create


@pytest.fixture
def single_package_repo(tmp_path: Path) -> Path:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "single-package"\nversion = "1.0.0"\n'
    )
    return tmp_path

