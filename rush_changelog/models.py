"""Data models for rush-changelog.

These Pydantic models describe the two Rush files the pipeline reads
(rush.json and a package's CHANGELOG.json) plus the values that flow
between pipeline stages. JSON keys are mapped through aliases so the rest
of the code can use Python names; unknown keys in either file are ignored.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import GetChangelogError


def _string_or_none(value: Any) -> str | None:
    """Keep strings; anything else (missing, number, object) becomes None."""
    return value if isinstance(value, str) else None


class PackageRef(BaseModel):
    """A project declared in rush.json.

    Attributes:
        name: npm package name, e.g. "@scope/pkg" (``packageName``).
        folder_path: Folder relative to the workspace root (``projectFolder``).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="packageName")
    folder_path: str = Field(alias="projectFolder")


class WorkspaceManifest(BaseModel):
    """The parts of rush.json this tool cares about."""

    model_config = ConfigDict(populate_by_name=True)

    packages: list[PackageRef] = Field(default_factory=list, alias="projects")


class ChangeComment(BaseModel):
    """A single change comment.

    ``text`` is None when the file has no usable ``comment`` string; such
    comments are left out of the release notes.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, alias="comment")

    @field_validator("text", mode="before")
    @classmethod
    def text_or_none(cls, value: Any) -> str | None:
        return _string_or_none(value)


class CommentBuckets(BaseModel):
    """Comments of one release, bucketed by semver impact.

    Any bucket may be missing from the file; missing buckets, and buckets
    that are not lists, are empty.
    """

    major: list[ChangeComment] = Field(default_factory=list)
    minor: list[ChangeComment] = Field(default_factory=list)
    patch: list[ChangeComment] = Field(default_factory=list)
    none: list[ChangeComment] = Field(default_factory=list)

    @field_validator("major", "minor", "patch", "none", mode="before")
    @classmethod
    def list_or_empty(cls, value: Any) -> list[Any]:
        if not isinstance(value, list):
            return []
        # Non-object items become text-less comments
        return [item if isinstance(item, dict) else {} for item in value]

    def all_comments(self) -> list[ChangeComment]:
        """Concatenate buckets in major, minor, patch, none order.

        Comments without text are skipped.
        """
        comments = [*self.major, *self.minor, *self.patch, *self.none]
        return [c for c in comments if c.text is not None]


class VersionEntry(BaseModel):
    """One released version in CHANGELOG.json.

    Attributes:
        version: Version string, compared verbatim. None when the entry has
                 no string ``version``; such entries never match a lookup.
        released_at: Display timestamp from ``date``; never reparsed.
        comments: Change comments for the release.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: str | None = None
    released_at: str = Field(default="", alias="date")
    comments: CommentBuckets = Field(default_factory=CommentBuckets)

    @field_validator("version", mode="before")
    @classmethod
    def version_or_none(cls, value: Any) -> str | None:
        return _string_or_none(value)

    @field_validator("released_at", mode="before")
    @classmethod
    def date_or_empty(cls, value: Any) -> str:
        return _string_or_none(value) or ""

    @field_validator("comments", mode="before")
    @classmethod
    def comments_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}


class ChangeHistory(BaseModel):
    """A package's CHANGELOG.json.

    ``entries`` is None when the key is absent from the file; the version
    locator treats that as a malformed record.
    """

    model_config = ConfigDict(populate_by_name=True)

    package_name: str = Field(default="", alias="name")
    entries: list[VersionEntry] | None = None


class Category(str, Enum):
    """Change categories, named after conventional-commit types."""

    FEAT = "feat"
    FIX = "fix"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"
    REVERT = "revert"
    DOCS = "docs"
    STYLE = "style"
    OTHER = "other"


class ClassifiedComment(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Category
    subject: str
    is_breaking: bool = False


class CategoryMeta(BaseModel):
    """Display metadata for a category section heading."""

    model_config = ConfigDict(frozen=True)

    category: Category
    emoji: str

    @property
    def label(self) -> str:
        return self.category.value.capitalize()


class ChangelogOptions(BaseModel):
    """Inputs for one pipeline run.

    Attributes:
        package_name: Package to look up in rush.json.
        version: Exact version string to find in CHANGELOG.json.
        workspace_root: Directory containing rush.json. None means the
                        current working directory at run time.
    """

    package_name: str | None = None
    version: str | None = None
    workspace_root: Path | None = None


class ChangelogFailure(BaseModel):
    """Why a run failed.

    Attributes:
        kind: Class name of the stage error, e.g. "VersionNotFound".
        message: Wrapped message, "Failed to get changelog: ...".
    """

    kind: str
    message: str


class ChangelogResult(BaseModel):
    """Outcome of a pipeline run: either Markdown or a failure."""

    markdown: str | None = None
    error: ChangelogFailure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the Markdown, or raise GetChangelogError on failure."""
        if self.error is not None:
            raise GetChangelogError(self.error.message, self.error.kind)
        return self.markdown or ""
