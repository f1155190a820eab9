"""Markdown rendering of a changelog entry.

Output layout::

    # <package> v<version>

    *Released: <date>*

    ## 🆕 Feat

    - **BREAKING**: restructured API
    - added validation

    ## 🐛 Fix

    - ...

Sections always follow CATEGORY_TABLE order, whatever order the comments
appear in. Categories without comments are left out entirely.
"""

from __future__ import annotations

from .conventional import classify
from .models import Category, CategoryMeta, ClassifiedComment, VersionEntry

CATEGORY_TABLE: tuple[CategoryMeta, ...] = (
    CategoryMeta(category=Category.FEAT, emoji="🆕"),
    CategoryMeta(category=Category.FIX, emoji="🐛"),
    CategoryMeta(category=Category.REFACTOR, emoji="🔨"),
    CategoryMeta(category=Category.PERF, emoji="⚡"),
    CategoryMeta(category=Category.TEST, emoji="✅"),
    CategoryMeta(category=Category.CHORE, emoji="🔧"),
    CategoryMeta(category=Category.REVERT, emoji="🔙"),
    CategoryMeta(category=Category.DOCS, emoji="📖"),
    CategoryMeta(category=Category.STYLE, emoji="💄"),
    CategoryMeta(category=Category.OTHER, emoji="🔖"),
)

BREAKING_MARKER = "**BREAKING**: "


def collect_comments(entry: VersionEntry) -> list[ClassifiedComment]:
    """Classify every comment of an entry, in major/minor/patch/none order."""
    return [classify(c.text) for c in entry.comments.all_comments()]


def group_by_category(
    comments: list[ClassifiedComment],
) -> dict[Category, list[ClassifiedComment]]:
    """Group comments by category, keeping first-seen order within a group."""
    groups: dict[Category, list[ClassifiedComment]] = {}
    for comment in comments:
        groups.setdefault(comment.category, []).append(comment)
    return groups


def _bullet(comment: ClassifiedComment) -> str:
    # Free-form text never carries the marker
    marked = comment.is_breaking and comment.category is not Category.OTHER
    return f"- {BREAKING_MARKER if marked else ''}{comment.subject}"


def render_markdown(entry: VersionEntry, package_name: str) -> str:
    """Render a version entry as release-notes Markdown.

    Args:
        entry: The changelog entry to render.
        package_name: Package name used in the top-level heading.

    Returns:
        Markdown text with trailing whitespace removed.
    """
    lines: list[str] = [
        f"# {package_name} v{entry.version}",
        "",
        f"*Released: {entry.released_at}*",
        "",
    ]

    groups = group_by_category(collect_comments(entry))
    for meta in CATEGORY_TABLE:
        changes = groups.get(meta.category)
        if not changes:
            continue
        lines.append(f"## {meta.emoji} {meta.label}")
        lines.append("")
        lines.extend(_bullet(change) for change in changes)
        lines.append("")

    return "\n".join(lines).rstrip()
