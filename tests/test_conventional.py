"""Tests for rush_changelog.conventional."""

from __future__ import annotations

import pytest

from rush_changelog.conventional import (
    ConventionalSubject,
    FreeformSubject,
    classify,
    parse_subject,
)
from rush_changelog.models import Category, ClassifiedComment


class TestParseSubject:
    def test_simple_type(self) -> None:
        assert parse_subject("fix: handle nulls") == ConventionalSubject(
            type="fix", subject="handle nulls"
        )

    def test_scope_and_breaking(self) -> None:
        parsed = parse_subject("feat(api)!: drop v1")
        assert parsed == ConventionalSubject(
            type="feat", scope="api", breaking=True, subject="drop v1"
        )

    def test_type_is_case_insensitive(self) -> None:
        parsed = parse_subject("FEAT: shout")
        assert isinstance(parsed, ConventionalSubject)
        assert parsed.type == "feat"

    def test_unknown_type_is_freeform(self) -> None:
        assert parse_subject("build: bump deps") == FreeformSubject(text="build: bump deps")

    def test_missing_space_after_colon_is_freeform(self) -> None:
        assert isinstance(parse_subject("fix:no space"), FreeformSubject)

    def test_empty_subject_is_freeform(self) -> None:
        assert isinstance(parse_subject("fix: "), FreeformSubject)

    def test_multiline_is_freeform(self) -> None:
        assert isinstance(parse_subject("fix: first line\nsecond line"), FreeformSubject)

    @pytest.mark.parametrize("brk", ["\r", "\u2028", "\u2029"])
    def test_other_line_breaks_are_freeform(self, brk: str) -> None:
        assert isinstance(parse_subject(f"fix: a{brk}b"), FreeformSubject)
        assert isinstance(parse_subject(f"fix({brk}): b"), FreeformSubject)

    def test_trims_before_matching(self) -> None:
        assert parse_subject("  docs: readme  ") == ConventionalSubject(
            type="docs", subject="readme"
        )


class TestClassify:
    @pytest.mark.parametrize(
        "commit_type",
        ["feat", "fix", "docs", "style", "refactor", "perf", "test", "chore", "revert"],
    )
    def test_every_type(self, commit_type: str) -> None:
        result = classify(f"{commit_type}: something")
        assert result.category == Category(commit_type)
        assert result.subject == "something"
        assert not result.is_breaking

    def test_breaking(self) -> None:
        assert classify("refactor!: new layout") == ClassifiedComment(
            category=Category.REFACTOR, subject="new layout", is_breaking=True
        )

    def test_scope_not_in_subject(self) -> None:
        assert classify("fix(core): Resolved issue").subject == "Resolved issue"

    def test_subject_not_retrimmed(self) -> None:
        assert classify("fix:  two spaces").subject == " two spaces"

    def test_freeform_is_other(self) -> None:
        assert classify("  Bumped internal tooling \n") == ClassifiedComment(
            category=Category.OTHER, subject="Bumped internal tooling", is_breaking=False
        )

    def test_carriage_return_is_other(self) -> None:
        classified = classify("fix: a\rb")
        assert classified.category is Category.OTHER
        assert classified.subject == "fix: a\rb"

    def test_plain_subject_is_stable(self) -> None:
        first = classify("Updated component to handle edge cases better")
        second = classify(first.subject)
        assert first == second
        assert second.category is Category.OTHER
