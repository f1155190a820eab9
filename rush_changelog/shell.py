"""Console output helpers.

Progress and error output for the changelog pipeline. Everything goes to
stderr so that stdout only ever carries the rendered Markdown.
"""

from __future__ import annotations

import sys


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a run (inputs, lookup, render) in the
    action log.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}", file=sys.stderr)


def info(msg: str) -> None:
    """Print an indented progress line under the current step."""
    print(f"  {msg}", file=sys.stderr)
