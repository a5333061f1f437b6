"""Version parsing utilities.

Package versions come from pyproject.toml, so they are PEP 440 strings
("0.5.0a1", "1.0.0rc1", "1.2"). They are read with packaging and turned
into semver objects for comparison.
"""

from __future__ import annotations

import semver
from packaging.version import Version

FIRST_MAJOR = semver.Version(1, 0, 0)


def parse_version(version_str: str) -> semver.Version:
    """Parse a PEP 440 version string into a semver.Version object.

    Handles incomplete versions by padding with zeros:
    - "1" → "1.0.0"
    - "1.2" → "1.2.0"
    - "1.2.3" → "1.2.3"

    Only the first 3 release components are used (major.minor.patch).
    Pre-releases and dev releases become the semver prerelease, so they
    sort below the final release:
    - "0.5.0a1" → "0.5.0-a1"
    - "1.0.0rc1.dev2" → "1.0.0-rc1.dev2"

    Epochs, post releases and local labels are dropped.

    Raises:
        packaging.version.InvalidVersion: Not a PEP 440 version.
    """
    version = Version(version_str)
    major, minor, patch = (version.release + (0, 0))[:3]

    prerelease: list[str] = []
    if version.pre is not None:
        prerelease.append(f"{version.pre[0]}{version.pre[1]}")
    if version.dev is not None:
        prerelease.append(f"dev{version.dev}")

    return semver.Version(
        major, minor, patch, prerelease=".".join(prerelease) or None
    )


def is_initial_development(version_str: str) -> bool:
    """True when the version is below 1.0.0.

    A major bump from such a version is the package's first major release.
    Pre-releases of 1.0.0 count as initial development too.

    Examples:
        "0.5.0" → True
        "1.0.0" → False
        "0.9" → True
        "1.0.0rc1" → True
    """
    return parse_version(version_str) < FIRST_MAJOR
