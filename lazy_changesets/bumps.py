"""Bump type ordering and grouping."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from .models import BumpType, Release

# Presentation order, most severe first.
BUMP_TYPES: tuple[BumpType, ...] = ("major", "minor", "patch", "none")


class BumpGroups(BaseModel):
    """Releases partitioned by bump type, input order kept inside each bucket."""

    major: list[Release] = Field(default_factory=list)
    minor: list[Release] = Field(default_factory=list)
    patch: list[Release] = Field(default_factory=list)
    none: list[Release] = Field(default_factory=list)

    def items(self) -> list[tuple[BumpType, list[Release]]]:
        """(bump type, releases) pairs in presentation order, empty ones included."""
        return [(bump, getattr(self, bump)) for bump in BUMP_TYPES]


def group_by_bump_type(releases: Iterable[Release]) -> BumpGroups:
    """Split releases into major/minor/patch/none buckets.

    Anything that isn't exactly "minor", "patch" or "none" is classified as
    major, so an unrecognized type is never dropped.
    """
    groups = BumpGroups()
    for release in releases:
        if release.type in ("minor", "patch", "none"):
            getattr(groups, release.type).append(release)
        else:
            groups.major.append(release)
    return groups
