"""Tests for lazy_changesets.change_types."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from lazy_changesets.change_types import (
    SAME_MESSAGE_QUESTION,
    ChangesetDrafts,
    ChangeTypeSelection,
    build_changeset_list,
    choose_change_types,
    collect_per_bump_type,
    collect_per_package,
    collect_summaries,
    get_description_with_previous,
)
from lazy_changesets.config import Config
from lazy_changesets.errors import PreconditionError
from lazy_changesets.models import ChangeCategory, ChangesetWithConfirmed, Release

PrompterFactory = Callable[..., MagicMock]

ADDED = ChangeCategory(title="Added", text="New functionality")
CHANGED = ChangeCategory(title="Changed", text="API changes")
REUSE_Q = "Do you want to reuse your previous answer for the current package?"

ENABLED = Config(
    should_ask_for_change_types=True, change_types=[ADDED, CHANGED]
)


def _descriptions(changeset: ChangesetWithConfirmed) -> list[list[str]]:
    return [
        [ct.description for ct in release.change_types or []]
        for release in changeset.releases
    ]


class TestChooseChangeTypes:
    def test_disabled_in_config(self, prompter_factory: PrompterFactory) -> None:
        prompter = prompter_factory()
        assert choose_change_types(prompter, Config()) is None
        prompter.ask_checkbox_plus.assert_not_called()

    def test_nothing_checked_is_a_no_op(self, prompter_factory: PrompterFactory) -> None:
        prompter = prompter_factory(checkboxes=[[]])
        assert choose_change_types(prompter, ENABLED) is None

    def test_returns_chosen_categories_in_config_order(
        self, prompter_factory: PrompterFactory
    ) -> None:
        prompter = prompter_factory(checkboxes=[["Changed", "Added"]])
        selection = choose_change_types(prompter, ENABLED)
        assert selection == ChangeTypeSelection(categories=[CHANGED, ADDED])

        choices = prompter.ask_checkbox_plus.call_args[0][1]
        assert [c.name for c in choices] == ["Added", "Changed"]
        assert choices[0].label == "Added (New functionality)"


class TestGetDescriptionWithPrevious:
    def test_asks_fresh_without_history(self, prompter_factory: PrompterFactory) -> None:
        prompter = prompter_factory(questions=["first"])
        answers: dict[str, str] = {}
        assert get_description_with_previous(prompter, answers, ADDED) == "first"
        assert answers == {"Added": "first"}
        prompter.ask_confirm.assert_not_called()
        prompter.ask_question.assert_called_once_with("[ Added ]")

    def test_reuses_previous_answer_verbatim(
        self, prompter_factory: PrompterFactory
    ) -> None:
        original = "  Added `--dry-run` 🚀 "
        prompter = prompter_factory(confirms={REUSE_Q: True})
        answers = {"Added": original}
        assert get_description_with_previous(prompter, answers, ADDED) == original
        prompter.ask_question.assert_not_called()
        assert REUSE_Q in prompter.ask_confirm.call_args[0][0]
        assert original in prompter.ask_confirm.call_args[0][0]

    def test_declining_overwrites_cache(self, prompter_factory: PrompterFactory) -> None:
        prompter = prompter_factory(questions=["new"], confirms={REUSE_Q: False})
        answers = {"Added": "old"}
        assert get_description_with_previous(prompter, answers, ADDED) == "new"
        assert answers == {"Added": "new"}

    def test_empty_previous_answer_is_not_offered(
        self, prompter_factory: PrompterFactory
    ) -> None:
        prompter = prompter_factory(questions=["now"])
        answers = {"Added": ""}
        assert get_description_with_previous(prompter, answers, ADDED) == "now"
        prompter.ask_confirm.assert_not_called()


class TestCollectPerBumpType:
    def test_one_answer_set_per_bump_type(self, prompter_factory: PrompterFactory) -> None:
        releases = [
            Release(name="pkg-a", type="patch"),
            Release(name="pkg-b", type="minor"),
            Release(name="pkg-c", type="patch"),
        ]
        prompter = prompter_factory(questions=["p-add", "p-chg", "m-add", "m-chg"])
        annotated = collect_per_bump_type(prompter, releases, [ADDED, CHANGED])

        assert [r.name for r in annotated] == ["pkg-a", "pkg-c", "pkg-b"]
        assert [[ct.description for ct in r.change_types or []] for r in annotated] == [
            ["p-add", "p-chg"],
            ["p-add", "p-chg"],
            ["m-add", "m-chg"],
        ]
        assert prompter.ask_question.call_count == 4

    def test_input_releases_are_not_mutated(
        self, prompter_factory: PrompterFactory
    ) -> None:
        releases = [Release(name="pkg-a", type="patch")]
        prompter = prompter_factory(questions=["x"])
        collect_per_bump_type(prompter, releases, [ADDED])
        assert releases[0].change_types is None


class TestCollectPerPackage:
    def test_one_changeset_per_package(self, prompter_factory: PrompterFactory) -> None:
        releases = [Release(name="pkg-a", type="patch"), Release(name="pkg-b", type="minor")]
        prompter = prompter_factory(
            questions=["a-add", "a-chg", "b-add", "b-chg"], confirms={REUSE_Q: False}
        )
        changesets = collect_per_package(prompter, releases, [ADDED, CHANGED], {})

        assert [cs.releases[0].name for cs in changesets] == ["pkg-a", "pkg-b"]
        assert [_descriptions(cs) for cs in changesets] == [
            [["a-add", "a-chg"]],
            [["b-add", "b-chg"]],
        ]
        assert all(cs.summary == "" and not cs.confirmed for cs in changesets)

    def test_reuse_across_packages(self, prompter_factory: PrompterFactory) -> None:
        releases = [Release(name="pkg-a", type="patch"), Release(name="pkg-b", type="patch")]
        prompter = prompter_factory(questions=["shared"], confirms={REUSE_Q: True})
        answers: dict[str, str] = {}
        changesets = collect_per_package(prompter, releases, [ADDED], answers)

        assert [_descriptions(cs) for cs in changesets] == [[["shared"]], [["shared"]]]
        assert answers == {"Added": "shared"}
        assert prompter.ask_question.call_count == 1


class TestBuildChangesetList:
    def test_per_bump_type_gives_single_changeset(
        self, prompter_factory: PrompterFactory
    ) -> None:
        releases = [Release(name="pkg-a", type="patch"), Release(name="pkg-b", type="patch")]
        prompter = prompter_factory(
            questions=["first description", "second description"],
            confirms={SAME_MESSAGE_QUESTION: True},
        )
        drafts = build_changeset_list(
            prompter, ChangeTypeSelection(categories=[ADDED, CHANGED]), releases
        )
        [changeset] = drafts.changesets
        assert _descriptions(changeset) == [
            ["first description", "second description"],
            ["first description", "second description"],
        ]

    def test_per_package_gives_changeset_per_release(
        self, prompter_factory: PrompterFactory
    ) -> None:
        releases = [Release(name="pkg-a", type="patch"), Release(name="pkg-b", type="patch")]
        prompter = prompter_factory(
            questions=["one", "two", "three", "four"],
            confirms={SAME_MESSAGE_QUESTION: False, REUSE_Q: False},
        )
        drafts = build_changeset_list(
            prompter, ChangeTypeSelection(categories=[ADDED, CHANGED]), releases
        )
        assert [_descriptions(cs) for cs in drafts.changesets] == [
            [["one", "two"]],
            [["three", "four"]],
        ]

    def test_requires_releases(self, prompter_factory: PrompterFactory) -> None:
        with pytest.raises(PreconditionError, match="must be set"):
            build_changeset_list(
                prompter_factory(), ChangeTypeSelection(categories=[ADDED]), []
            )

    def test_requires_categories(self, prompter_factory: PrompterFactory) -> None:
        with pytest.raises(PreconditionError, match="must be set"):
            build_changeset_list(
                prompter_factory(),
                ChangeTypeSelection(categories=[]),
                [Release(name="pkg-a", type="patch")],
            )


class TestCollectSummaries:
    def test_summary_per_changeset(self, prompter_factory: PrompterFactory) -> None:
        drafts = ChangesetDrafts(
            changesets=[
                ChangesetWithConfirmed(releases=[Release(name="pkg-a", type="patch")]),
                ChangesetWithConfirmed(releases=[Release(name="pkg-b", type="patch")]),
            ],
        )
        prompter = prompter_factory(questions=["for a", ""], editor=["for b"])
        done = collect_summaries(prompter, drafts, Config())

        assert [(cs.summary, cs.confirmed) for cs in done.changesets] == [
            ("for a", False),
            ("for b", True),
        ]
        assert drafts.changesets[0].summary == ""

    def test_requires_changesets(self, prompter_factory: PrompterFactory) -> None:
        drafts = ChangesetDrafts(changesets=[])
        with pytest.raises(PreconditionError, match="changeset list must be set"):
            collect_summaries(prompter_factory(), drafts, Config())
