"""Per-package change history (CHANGELOG.json) loading and version lookup."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from .errors import (
    ChangeHistoryNotFound,
    ChangeHistoryParseError,
    MalformedChangeHistory,
    VersionNotFound,
)
from .jsonc import read_jsonc
from .models import ChangeHistory, VersionEntry
from .shell import info

CHANGELOG_FILENAME = "CHANGELOG.json"

_MALFORMED = "Invalid changelog format: missing or invalid entries array"


def load_change_history(package_folder: Path) -> ChangeHistory:
    """Load and validate CHANGELOG.json from a package folder.

    The record is validated once here: absent comment buckets and dates get
    their defaults, and anything structurally wrong is rejected up front.

    Raises:
        ChangeHistoryNotFound: If the file does not exist.
        ChangeHistoryParseError: If it cannot be read or is not valid JSON.
        MalformedChangeHistory: If the JSON does not fit the record shape.
    """
    changelog_path = Path(package_folder) / CHANGELOG_FILENAME

    if not changelog_path.is_file():
        raise ChangeHistoryNotFound(f"{CHANGELOG_FILENAME} not found at {changelog_path}")

    try:
        data = read_jsonc(changelog_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ChangeHistoryParseError(
            f"Failed to parse {CHANGELOG_FILENAME} at {changelog_path}: {exc}"
        ) from exc

    try:
        history = ChangeHistory.model_validate(data)
    except ValidationError as exc:
        raise MalformedChangeHistory(f"{_MALFORMED} ({changelog_path}): {exc}") from exc

    info(f"{CHANGELOG_FILENAME}: {changelog_path}")
    return history


def find_version_entry(history: ChangeHistory, version: str) -> VersionEntry:
    """Return the first entry whose version equals ``version`` exactly.

    Raises:
        MalformedChangeHistory: If the record has no entries list at all.
        VersionNotFound: If no entry matches, including an empty list.
    """
    if history.entries is None:
        raise MalformedChangeHistory(_MALFORMED)

    for entry in history.entries:
        if entry.version == version:
            return entry

    raise VersionNotFound(
        f'Version "{version}" not found in changelog for {history.package_name}'
    )
