"""Shared fixtures for agent_composer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers import CLAUDE_MD, REVIEWER_MD, SKILL_MD, write


@pytest.fixture
def workspace(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create a scratch directory whose absolute path has no category fragment.

    Categories are inferred from the whole absolute path, and the per-test
    ``tmp_path`` is named after the test (``.../test_foo0``), which would
    match the ``/test`` rule for every file below it.
    """
    return tmp_path_factory.mktemp("workspace")


@pytest.fixture
def project_dir(workspace: Path) -> Path:
    """Create a realistic project with agent files and noise.

    Layout::

        project/
            CLAUDE.md
            README.md
            apps/web/AGENTS.md
            src/agents/code-reviewer.md
            src/agents/notes.txt
            skills/release_notes.md
            .claude/commands.md
            node_modules/pkg/CLAUDE.md
    """
    root = workspace / "project"
    write(root / "CLAUDE.md", CLAUDE_MD)
    write(root / "README.md", "# Readme\n\nNot an agent.\n")
    write(root / "apps" / "web" / "AGENTS.md", "# Web app\n\nNext.js conventions.\n")
    write(root / "src" / "agents" / "code-reviewer.md", REVIEWER_MD)
    write(root / "src" / "agents" / "notes.txt", "scratch\n")
    write(root / "skills" / "release_notes.md", SKILL_MD)
    write(root / ".claude" / "commands.md", "Run the test suite before committing.\n")
    write(root / "node_modules" / "pkg" / "CLAUDE.md", "# Vendored\n\nIgnore me.\n")
    return root


@pytest.fixture
def empty_dir(workspace: Path) -> Path:
    """Create an empty project directory."""
    root = workspace / "empty"
    root.mkdir()
    return root
