"""CLI entry point for lazy-changesets."""

from __future__ import annotations

from pathlib import Path

import click

from lazy_changesets.add import add_changeset
from lazy_changesets.config import CHANGESET_DIR, ConfigError, load_config
from lazy_changesets.errors import ExitError
from lazy_changesets.prompts import ClickPrompter
from lazy_changesets.toml import (
    TOOL_NAME,
    get_tool_table,
    load_pyproject,
    save_pyproject,
    set_tool_table,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_TOOL_TABLE = {
    "commit": False,
    "base-branch": "main",
    "should-ask-for-change-types": False,
    "always-open-editor": False,
}


def _require_pyproject(root: Path) -> Path:
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        raise click.ClickException(
            "No pyproject.toml found in current directory. Run from the repo root."
        )
    return pyproject


@click.group()
@click.version_option(package_name="lazy-changesets")
def cli() -> None:
    """Describe pending package releases as changesets."""


@cli.command()
def init() -> None:
    """Set up the .changeset folder and default configuration."""
    root = Path.cwd()
    pyproject = _require_pyproject(root)

    dest_dir = root / CHANGESET_DIR
    dest_dir.mkdir(parents=True, exist_ok=True)
    readme = dest_dir / "README.md"
    if not readme.exists():
        readme.write_text((TEMPLATES_DIR / "README.md").read_text())
        click.echo(f"✓ Wrote {readme.relative_to(root)}")

    doc = load_pyproject(pyproject)
    if get_tool_table(doc):
        click.echo(f"✓ [tool.{TOOL_NAME}] already configured")
    else:
        set_tool_table(doc, DEFAULT_TOOL_TABLE)
        save_pyproject(pyproject, doc)
        click.echo(f"✓ Added [tool.{TOOL_NAME}] to pyproject.toml")

    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Commit the .changeset folder")
    click.echo("  2. Describe your first change:")
    click.echo("       lazy-changesets add")


@cli.command()
@click.option("--empty", is_flag=True, help="Add a changeset that releases nothing.")
@click.option(
    "--open",
    "open_editor",
    is_flag=True,
    help="Open the written changeset in your editor.",
)
@click.pass_context
def add(ctx: click.Context, empty: bool, open_editor: bool) -> None:
    """Interactively add a changeset."""
    root = Path.cwd()
    _require_pyproject(root)

    try:
        config = load_config(root)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    try:
        add_changeset(
            root, config, ClickPrompter(), empty=empty, open_editor=open_editor
        )
    except ExitError as exc:
        ctx.exit(exc.code)
