"""CLI entry point for rush-changelog."""

from __future__ import annotations

from pathlib import Path

import click

from rush_changelog.action import run_action
from rush_changelog.models import ChangelogOptions
from rush_changelog.pipeline import run_changelog


@click.group()
@click.version_option(package_name="rush-changelog")
def cli() -> None:
    """Render release notes for one version of a Rush package."""


@cli.command()
@click.argument("project_name")
@click.argument("version")
@click.option(
    "-C",
    "--working-directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing rush.json. Defaults to the current directory.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the Markdown to this file instead of stdout.",
)
def get(
    project_name: str, version: str, working_directory: Path | None, output: Path | None
) -> None:
    """Print the changelog of PROJECT_NAME at VERSION as Markdown."""
    result = run_changelog(
        ChangelogOptions(
            package_name=project_name,
            version=version,
            workspace_root=working_directory,
        )
    )
    if result.error is not None:
        raise click.ClickException(result.error.message)

    markdown = result.markdown or ""
    if output is None:
        click.echo(markdown)
        return

    output.write_text(markdown + "\n", encoding="utf-8")
    click.echo(f"✓ Wrote {output}", err=True)


@cli.command()
def action() -> None:
    """Run as a GitHub Actions step (reads INPUT_* variables)."""
    run_action()
