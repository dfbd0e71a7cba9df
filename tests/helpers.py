"""Shared test helpers for building project trees on disk."""

from __future__ import annotations

from pathlib import Path

REVIEWER_MD = """\
---
name: Code Reviewer
description: Reviews pull requests for style and correctness
category: quality
tags: [review, style]
priority: high
estimatedTokens: 250
---

# Code Reviewer

Look at every diff carefully.
"""

CLAUDE_MD = """\
# Project Instructions

Use uv for dependency management.
"""

SKILL_MD = """\
# Release Notes

Drafts release notes from merged pull requests.
"""


def write(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
