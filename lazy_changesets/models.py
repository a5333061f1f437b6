"""Data models for lazy-changesets.

These Pydantic models represent the records that flow through the add
workflow, from package discovery to the written changeset.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field

BumpType = Literal["major", "minor", "patch", "none"]


class Package(BaseModel):
    """A single package in the monorepo workspace.

    Attributes:
        name: Canonical package name, unique within the workspace.
        version: Current version string from pyproject.toml.
        path: Relative path from workspace root to the package directory.
    """

    name: str
    version: str
    path: str = ""


class ChangeCategory(BaseModel):
    """A configured kind of change, e.g. "Added" with a short explanation."""

    title: str
    text: str = ""


class ChangeType(BaseModel):
    """One categorized description attached to a release.

    ``category`` is a plain label for ad-hoc categories or a
    ChangeCategory for the configured ones. An empty ``description`` is
    kept as-is and only dropped when the changeset is rendered.
    """

    category: Union[ChangeCategory, str]
    description: str = ""

    @property
    def title(self) -> str:
        if isinstance(self.category, ChangeCategory):
            return self.category.title
        return self.category.split(" ")[0]


class Release(BaseModel):
    """A package selected for release and the bump it should get.

    ``type`` is a plain string rather than BumpType so that unknown values
    survive until classification, which files them under major.
    """

    name: str
    type: str
    change_types: list[ChangeType] | None = None


class Changeset(BaseModel):
    """The unit of persistence: releases plus a summary for the changelog."""

    releases: list[Release] = Field(default_factory=list)
    summary: str = ""


class ChangesetWithConfirmed(Changeset):
    """A changeset awaiting the writer.

    Attributes:
        confirmed: True once the user explicitly accepted it, or once a
                   non-empty summary came back from the external editor.
    """

    confirmed: bool = False

    def to_changeset(self) -> Changeset:
        return Changeset(releases=self.releases, summary=self.summary)
