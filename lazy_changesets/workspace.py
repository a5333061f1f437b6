"""Workspace discovery: which packages exist and which changed.

Reads [tool.uv.workspace].members from the root pyproject.toml to find
package directories, the same way a uv workspace resolves them.
"""

from __future__ import annotations

import glob
from pathlib import Path

from .models import Package
from .shell import changed_files
from .toml import (
    get_project_name,
    get_project_version,
    get_workspace_member_globs,
    load_pyproject,
)


def discover_packages(root: Path) -> list[Package]:
    """Scan the workspace and discover all packages.

    A root pyproject.toml without workspace members is treated as a
    single-package repo whose only package is the root project.

    Args:
        root: Workspace root containing pyproject.toml.

    Returns:
        Packages in member-glob order, each glob's matches sorted by path.
    """
    root_doc = load_pyproject(root / "pyproject.toml")
    member_globs = get_workspace_member_globs(root_doc)

    if not member_globs:
        return [
            Package(
                name=get_project_name(root_doc, root.name),
                version=get_project_version(root_doc),
                path=".",
            )
        ]

    # Expand globs to find all package directories
    packages: list[Package] = []
    seen: set[str] = set()
    for pattern in member_globs:
        for match in sorted(glob.glob(str(root / pattern))):
            d = Path(match)
            if not (d / "pyproject.toml").exists():
                continue
            doc = load_pyproject(d / "pyproject.toml")
            name = get_project_name(doc, d.name)
            if name in seen:
                continue
            seen.add(name)
            packages.append(
                Package(
                    name=name,
                    version=get_project_version(doc),
                    path=d.relative_to(root).as_posix(),
                )
            )
    return packages


def get_changed_packages(
    packages: list[Package], root: Path, base_branch: str
) -> list[str]:
    """Names of packages with files changed since ``base_branch``.

    A package counts as changed if any file under its directory appears in
    the branch diff. The root package of a single-package repo ("." path)
    matches any change.
    """
    files = changed_files(base_branch, root)
    if not files:
        return []

    changed: list[str] = []
    for pkg in packages:
        if pkg.path in ("", "."):
            changed.append(pkg.name)
            continue
        prefix = pkg.path.rstrip("/") + "/"
        if any(f.startswith(prefix) for f in files):
            changed.append(pkg.name)
    return changed
