"""Conventional-commit subject parsing.

Changelog comments in Rush are free text, but most teams write them as
conventional-commit subjects::

    <type>[(<scope>)][!]: <subject>

e.g. "feat(api)!: drop legacy endpoints". This module recognises that
grammar and turns each comment into a ClassifiedComment. Text that does
not follow the grammar is not an error; it falls into the "other" category
untouched.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from .models import Category, ClassifiedComment

COMMIT_TYPES = ("feat", "fix", "docs", "style", "refactor", "perf", "test", "chore", "revert")

# The whole (trimmed) comment must match. Scope and subject exclude line
# breaks (\r, \n, U+2028, U+2029), so multi-line comments are free-form.
_LINE = r"[^\r\n\u2028\u2029]+"
_SUBJECT_RE = re.compile(
    rf"(?P<type>{'|'.join(COMMIT_TYPES)})"
    rf"(?:\((?P<scope>{_LINE})\))?"
    r"(?P<breaking>!)?"
    rf": (?P<subject>{_LINE})",
    re.IGNORECASE | re.ASCII,
)


class ConventionalSubject(BaseModel):
    """A comment that follows the conventional-commit grammar."""

    model_config = ConfigDict(frozen=True)

    type: str
    scope: str | None = None
    breaking: bool = False
    subject: str


class FreeformSubject(BaseModel):
    """A comment that does not follow the grammar."""

    model_config = ConfigDict(frozen=True)

    text: str


def parse_subject(text: str) -> ConventionalSubject | FreeformSubject:
    """Parse trimmed comment text against the conventional-commit grammar.

    Examples:
        "fix: handle nulls" → ConventionalSubject(type="fix", subject="handle nulls")
        "FEAT(ui)!: new look" → ConventionalSubject(type="feat", scope="ui",
                                                    breaking=True, subject="new look")
        "Bump deps" → FreeformSubject(text="Bump deps")
    """
    text = text.strip()
    match = _SUBJECT_RE.fullmatch(text)
    if match is None:
        return FreeformSubject(text=text)

    return ConventionalSubject(
        type=match.group("type").lower(),
        scope=match.group("scope"),
        breaking=match.group("breaking") is not None,
        subject=match.group("subject"),
    )


def classify(text: str) -> ClassifiedComment:
    """Classify a raw changelog comment into a category and subject line."""
    parsed = parse_subject(text)
    if isinstance(parsed, FreeformSubject):
        return ClassifiedComment(category=Category.OTHER, subject=parsed.text)
    return ClassifiedComment(
        category=Category(parsed.type),
        subject=parsed.subject,
        is_breaking=parsed.breaking,
    )
