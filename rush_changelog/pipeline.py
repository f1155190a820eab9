"""Changelog pipeline: resolve → load → find → render.

This module orchestrates one rush-changelog run:
1. Check that a package name and version were given
2. Read rush.json and resolve the package's project folder
3. Load the package's CHANGELOG.json
4. Find the entry for the requested version
5. Render that entry as Markdown

Stages raise ChangelogError subclasses and stop at the first failure.
run_changelog() turns that failure into a ChangelogResult whose message is
prefixed with "Failed to get changelog: " so callers can match on the
original text.
"""

from __future__ import annotations

from pathlib import Path

from .errors import ChangelogError, MissingInput
from .history import find_version_entry, load_change_history
from .models import ChangelogFailure, ChangelogOptions, ChangelogResult
from .render import render_markdown
from .shell import info, step
from .workspace import find_package_folder

FAILURE_PREFIX = "Failed to get changelog: "


def check_inputs(options: ChangelogOptions) -> None:
    """Reject empty required inputs before touching the file system.

    Raises:
        MissingInput: If the package name or version is empty.
    """
    if not options.package_name:
        raise MissingInput("Project name is required")
    if not options.version:
        raise MissingInput("Version is required")


def build_changelog(options: ChangelogOptions) -> str:
    """Run every stage in order and return the rendered Markdown.

    Raises:
        ChangelogError: From whichever stage fails first.
    """
    check_inputs(options)
    workspace_root = options.workspace_root or Path.cwd()

    step(f"Resolving {options.package_name}@{options.version}")
    package_folder = find_package_folder(options.package_name, workspace_root)
    history = load_change_history(package_folder)
    entry = find_version_entry(history, options.version)

    comment_count = len(entry.comments.all_comments())
    info(f"Found {entry.version} ({entry.released_at or 'no date'}), {comment_count} comments")
    return render_markdown(entry, options.package_name)


def run_changelog(options: ChangelogOptions) -> ChangelogResult:
    """Execute the pipeline and report success or failure as a result.

    Only ChangelogError is converted; anything else is a bug and propagates.
    """
    try:
        markdown = build_changelog(options)
    except ChangelogError as exc:
        return ChangelogResult(
            error=ChangelogFailure(kind=exc.kind, message=f"{FAILURE_PREFIX}{exc}")
        )
    return ChangelogResult(markdown=markdown)


def get_changelog(
    package_name: str | None,
    version: str | None,
    workspace_root: Path | str | None = None,
) -> str:
    """Return release-notes Markdown for one package version.

    A missing (None or empty) package name or version is reported like any
    other stage failure.

    Raises:
        GetChangelogError: With the wrapped message if any stage fails.
    """
    options = ChangelogOptions(
        package_name=package_name, version=version, workspace_root=workspace_root
    )
    return run_changelog(options).unwrap()
