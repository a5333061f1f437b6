"""Configuration for the add workflow.

Read from [tool.lazy-changesets] in the workspace root pyproject.toml:

    [tool.lazy-changesets]
    commit = ["lazy_changesets.commit", { skip-ci = true }]
    base-branch = "main"
    should-ask-for-change-types = true
    always-open-editor = false
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import ChangeCategory
from .toml import get_tool_table, load_pyproject

CHANGESET_DIR = ".changeset"
DEFAULT_COMMIT_MODULE = "lazy_changesets.commit"

DEFAULT_CHANGE_TYPES = [
    ChangeCategory(title="Added", text="New functionality, arg options, more UI elements"),
    ChangeCategory(title="Changed", text="Visual changes, internal changes, API changes"),
    ChangeCategory(title="Removed", text="Dead code, feature flags, consumer APIs"),
    ChangeCategory(
        title="Types",
        text="Strictly related to the type system, no impact on runtime code",
    ),
    ChangeCategory(title="Documentation", text="README, general docs, package metadata"),
    ChangeCategory(
        title="Infra",
        text="Tooling, performance, things under the hood that consumers won't notice",
    ),
    ChangeCategory(title="UX", text="UX change"),
    ChangeCategory(title="Misc", text="Anything else not noted above"),
]


class ConfigError(ValueError):
    """The [tool.lazy-changesets] table is malformed."""


class Config(BaseModel):
    """Validated add-workflow settings.

    Attributes:
        commit: False to leave the changeset for a manual commit, or a
                (module, options) pair naming the commit message generator.
                ``true`` in TOML selects the built-in generator.
        base_branch: Branch that "changed packages" are computed against.
        should_ask_for_change_types: Offer categorized descriptions.
        always_open_editor: Skip the console summary question.
        change_types: Categories offered when change types are enabled.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    commit: Union[bool, tuple[str, Union[dict[str, Any], None]]] = False
    base_branch: str = Field("main", alias="base-branch")
    should_ask_for_change_types: bool = Field(
        False, alias="should-ask-for-change-types"
    )
    always_open_editor: bool = Field(False, alias="always-open-editor")
    change_types: list[ChangeCategory] = Field(
        default_factory=lambda: list(DEFAULT_CHANGE_TYPES), alias="change-types"
    )

    @field_validator("commit", mode="before")
    @classmethod
    def _normalize_commit(cls, value: Any) -> Any:
        if value is True:
            return (DEFAULT_COMMIT_MODULE, None)
        if isinstance(value, str):
            return (value, None)
        if isinstance(value, list) and len(value) == 1:
            return (value[0], None)
        return value


def load_config(root: Path) -> Config:
    """Load configuration from ``root/pyproject.toml``.

    A missing file or table yields the defaults.

    Raises:
        ConfigError: If the table doesn't validate.
    """
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return Config()
    table = get_tool_table(load_pyproject(pyproject))
    try:
        return Config.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.lazy-changesets] configuration:\n{exc}") from exc
