"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Static Rush workspace with two projects."""
    return FIXTURES_DIR


@pytest.fixture
def make_workspace(tmp_path: Path) -> Callable[..., Path]:
    """Create a Rush workspace in tmp_path.

    Call with a mapping of package name → (project folder, changelog data).
    A changelog of None leaves the project without a CHANGELOG.json.
    """

    def _make(packages: dict[str, tuple[str, Any]]) -> Path:
        projects = []
        for name, (folder, changelog) in packages.items():
            projects.append({"packageName": name, "projectFolder": folder})
            project_dir = tmp_path / folder
            project_dir.mkdir(parents=True, exist_ok=True)
            if changelog is not None:
                (project_dir / "CHANGELOG.json").write_text(json.dumps(changelog))
        (tmp_path / "rush.json").write_text(json.dumps({"projects": projects}))
        return tmp_path

    return _make


@pytest.fixture
def sample_changelog() -> dict[str, Any]:
    """A CHANGELOG.json record with mixed buckets and categories."""
    return {
        "name": "@scope/pkg",
        "entries": [
            {
                "version": "2.0.0",
                "date": "Sat, 01 Jan 2022 00:00:00 GMT",
                "comments": {
                    "major": [{"comment": "feat(api)!: removed v1 endpoints"}],
                    "patch": [
                        {"comment": "fix: handle empty payloads"},
                        {"comment": "Tidied up logging"},
                    ],
                },
            },
            {"version": "1.0.0", "date": "Fri, 01 Jan 2021 00:00:00 GMT"},
        ],
    }
