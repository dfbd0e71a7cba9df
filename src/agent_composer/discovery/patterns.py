"""Path conventions for agent instruction files and ignored directories.

An "agent file" is a Markdown document that gives an AI coding assistant
instructions. Projects keep them under a handful of well-known names and
locations:

- ``CLAUDE.md`` -- root instructions, at any depth.
- ``AGENTS.md`` -- app-level instructions, at any depth.
- ``agents/*.md`` and ``skills/*.md`` -- one file per agent or skill.
- ``.claude/*.md`` -- Claude Code's project directory (commands, skills).

The rules are unioned: a path matching several of them is simply an agent
file. All checks are case-insensitive and operate on the path string only,
so classification never touches the filesystem.

Ignore patterns are matched against paths relative to the scan root, either
as a case-insensitive substring of the whole relative path or as an exact
match of one path segment.
"""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

# Directories that never contain agent files worth composing.
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
    ".turbo",
    ".vercel",
    ".netlify",
)

AGENT_FILENAMES: frozenset[str] = frozenset({"claude.md", "agents.md"})

AGENT_DIRECTORIES: frozenset[str] = frozenset({"agents", "skills", ".claude"})

MARKDOWN_SUFFIX = ".md"

# Human-readable summary of the conventions, shown when a scan finds nothing.
EXPECTED_PATTERNS: tuple[tuple[str, str], ...] = (
    ("CLAUDE.md", "root instructions"),
    ("AGENTS.md", "app-specific instructions"),
    ("agents/*.md", "one agent per file"),
    ("skills/*.md", "one skill per file"),
    (".claude/*.md", "Claude Code project files"),
)


def _segments(path: str | PathLike[str]) -> list[str]:
    """Split a path into lower-cased segments, accepting both separators."""
    normalized = str(path).replace("\\", "/").lower()
    return [segment for segment in normalized.split("/") if segment]


def is_agent_file(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` follows one of the agent file conventions.

    Args:
        path: Absolute or relative file path. Only the string is inspected.

    Returns:
        True for ``claude.md``/``agents.md`` at any depth, and for any
        ``.md`` file below an ``agents``, ``skills`` or ``.claude``
        directory segment.
    """
    segments = _segments(path)
    if not segments:
        return False

    filename = segments[-1]
    if filename in AGENT_FILENAMES:
        return True

    if not filename.endswith(MARKDOWN_SUFFIX):
        return False

    return any(segment in AGENT_DIRECTORIES for segment in segments[:-1])


def merge_ignore_patterns(extra: Iterable[str] = ()) -> tuple[str, ...]:
    """Union the built-in ignore patterns with caller-supplied ones.

    Blank patterns are dropped (an empty substring would match every path)
    and duplicates are removed while keeping first-seen order.

    Args:
        extra: Additional patterns, e.g. from ``--ignore`` options.

    Returns:
        Lower-cased, de-duplicated tuple of patterns.
    """
    merged: dict[str, None] = {}
    for pattern in (*DEFAULT_IGNORE_PATTERNS, *extra):
        cleaned = pattern.strip().lower()
        if cleaned:
            merged.setdefault(cleaned, None)
    return tuple(merged)


def should_ignore(relative_path: str, patterns: Iterable[str]) -> bool:
    """Check a root-relative path against ignore patterns.

    Args:
        relative_path: Path relative to the scan root, ``/``-separated.
        patterns: Lower-cased patterns from ``merge_ignore_patterns``.

    Returns:
        True if any pattern is a substring of the path or equals one of
        its segments.
    """
    normalized = relative_path.replace("\\", "/").lower()
    segments = normalized.split("/")
    for pattern in patterns:
        if pattern in normalized:
            return True
        if pattern in segments:
            return True
    return False
