"""Commit message generation for `commit = true`.

A custom generator is any importable module with the same
``get_add_message(changeset, options)`` function, configured as
``commit = ["my_pkg.changeset_commit", { ... }]``.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import Any

from .config import Config
from .models import Changeset

AddMessageFn = Callable[[Changeset, Any], str]


def get_add_message(changeset: Changeset, options: dict[str, Any] | None) -> str:
    """Message for committing a newly added changeset.

    Examples:
        summary "Fix login" → "docs(changeset): Fix login"
        empty changeset → "docs(changeset): add empty changeset"
    """
    summary = changeset.summary or "add empty changeset"
    skip_ci = bool(options and options.get("skip-ci"))
    return f"docs(changeset): {summary}{' [skip ci]' if skip_ci else ''}"


def get_commit_functions(config: Config) -> tuple[AddMessageFn | None, Any]:
    """Resolve the configured generator.

    Returns:
        (get_add_message, options), or (None, None) when committing is off.

    Raises:
        ImportError: If the configured module can't be imported.
        AttributeError: If it has no ``get_add_message``.
    """
    if not config.commit:
        return None, None
    module_name, options = config.commit
    module = importlib.import_module(module_name)
    return module.get_add_message, options
