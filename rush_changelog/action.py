"""GitHub Actions entry point.

Reads the action inputs from ``INPUT_*`` environment variables, runs the
pipeline, and publishes the Markdown as the ``markdown`` step output. On
failure the step is marked failed with the wrapped error message and no
output is written.

Run with ``python -m rush_changelog.action``.
"""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path

from .models import ChangelogOptions
from .pipeline import run_changelog
from .shell import step


def get_input(name: str) -> str:
    """Read an action input the way @actions/core does.

    "project-name" is read from ``INPUT_PROJECT-NAME``. Missing inputs are
    returned as an empty string.
    """
    key = f"INPUT_{name.replace(' ', '_').upper()}"
    return os.environ.get(key, "").strip()


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str) -> None:
    """Publish a (possibly multi-line) step output.

    Appends a heredoc block to the file named by ``GITHUB_OUTPUT``. Outside
    of Actions the value is printed to stdout instead.
    """
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        print(value)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def set_failed(message: str) -> None:
    """Mark the step failed with an error annotation and exit 1."""
    print(f"::error::{_escape_data(message)}")
    sys.exit(1)


def read_options() -> ChangelogOptions:
    """Build pipeline options from the action inputs."""
    working_directory = get_input("working-directory")
    return ChangelogOptions(
        version=get_input("version"),
        package_name=get_input("project-name"),
        workspace_root=Path(working_directory) if working_directory else None,
    )


def run_action() -> None:
    """Run the pipeline for the current action inputs."""
    result = run_changelog(read_options())
    if result.error is not None:
        set_failed(result.error.message)
        return

    step("Publishing markdown output")
    set_output("markdown", result.markdown or "")


def main() -> None:
    run_action()


if __name__ == "__main__":
    main()
