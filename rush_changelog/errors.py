"""Error types raised while resolving and rendering a changelog.

Every stage of the pipeline fails fast with one of these. They all derive
from ChangelogError so the orchestrator can wrap them uniformly; nothing
here is retried, since each one stems from missing or malformed static input.
"""

from __future__ import annotations


class ChangelogError(Exception):
    """Base class for all changelog pipeline failures."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class MissingInput(ChangelogError):
    """A required input (package name or version) was empty."""


class ManifestNotFound(ChangelogError):
    """rush.json does not exist under the workspace root."""


class ManifestParseError(ChangelogError):
    """rush.json exists but could not be read, parsed or validated."""


class PackageNotFound(ChangelogError):
    """The requested package is not declared in rush.json."""


class ChangeHistoryNotFound(ChangelogError):
    """The package folder has no CHANGELOG.json."""


class ChangeHistoryParseError(ChangelogError):
    """CHANGELOG.json exists but could not be read or parsed."""


class MalformedChangeHistory(ChangelogError):
    """CHANGELOG.json parsed but its entries do not have the expected shape."""


class VersionNotFound(ChangelogError):
    """No changelog entry matches the requested version."""


class GetChangelogError(ChangelogError):
    """Outer error carrying a wrapped pipeline failure.

    Attributes:
        failure_kind: Class name of the stage error that caused it.
    """

    def __init__(self, message: str, failure_kind: str) -> None:
        super().__init__(message)
        self.failure_kind = failure_kind

    @property
    def kind(self) -> str:
        """Kind of the underlying stage error, e.g. "VersionNotFound"."""
        return self.failure_kind
