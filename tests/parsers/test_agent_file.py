"""Tests for AgentFileParser metadata extraction.

Each record field is checked for both its explicit front matter value and
its inferred fallback.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import pytest

from agent_composer.exceptions import ParseError
from agent_composer.parsers.agent_file import (
    NO_DESCRIPTION,
    AgentFileParser,
    extract_description,
    generate_id,
    infer_category,
    name_from_path,
    parse_agent_file,
)
from agent_composer.parsers.base import Priority

from tests.helpers import REVIEWER_MD, write


@pytest.fixture
def parser() -> AgentFileParser:
    return AgentFileParser()


class TestGenerateId:
    """Slug derivation from the root-relative path."""

    def test_nested_path(self) -> None:
        root = Path("/proj")
        assert generate_id(root / "src/agents/Code_Reviewer.md", root) == "src/agents/code-reviewer"

    def test_root_file(self) -> None:
        assert generate_id(Path("/proj/CLAUDE.md"), Path("/proj")) == "claude"

    def test_dot_directory(self) -> None:
        assert generate_id(Path("/proj/.claude/cmd.md"), Path("/proj")) == "-claude/cmd"

    def test_only_trailing_md_removed(self) -> None:
        assert generate_id(Path("/proj/a.md.md"), Path("/proj")) == "a-md"

    def test_spaces_and_symbols(self) -> None:
        assert generate_id(Path("/proj/skills/My Skill (v2).md"), Path("/proj")) == "skills/my-skill--v2-"


class TestNameFromPath:
    """Display names inferred from file names."""

    def test_claude_special_case(self) -> None:
        assert name_from_path(Path("/p/claude.md")) == "CLAUDE.md (Root Instructions)"

    def test_agents_special_case(self) -> None:
        assert name_from_path(Path("/p/AGENTS.md")) == "AGENTS.md (App Instructions)"

    def test_kebab_case(self) -> None:
        assert name_from_path(Path("/p/code-reviewer.md")) == "Code Reviewer"

    def test_snake_case(self) -> None:
        assert name_from_path(Path("/p/deploy_helper.md")) == "Deploy Helper"

    def test_existing_capitals_kept(self) -> None:
        assert name_from_path(Path("/p/api-HTTPClient.md")) == "Api HTTPClient"

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("CLAUDE.MD", "CLAUDE.md (Root Instructions)"),
            ("Agents.Md", "AGENTS.md (App Instructions)"),
            ("code-reviewer.MD", "Code Reviewer"),
        ],
    )
    def test_extension_stripped_in_any_case(self, filename: str, expected: str) -> None:
        assert name_from_path(Path("/p") / filename) == expected

    def test_no_extension(self) -> None:
        assert name_from_path(Path("/p/notes")) == "Notes"


class TestExtractDescription:
    """First prose line of the body."""

    def test_skips_headings_and_blank_lines(self) -> None:
        assert extract_description("# Title\n\n## Sub\n\n  First line.  \nSecond") == "First line."

    def test_no_prose(self) -> None:
        assert extract_description("# Only\n\n## Headings\n") == NO_DESCRIPTION

    def test_empty_body(self) -> None:
        assert extract_description("") == NO_DESCRIPTION

    def test_exactly_150_kept(self) -> None:
        line = "x" * 150
        assert extract_description(line) == line

    def test_long_line_truncated_to_150(self) -> None:
        description = extract_description("y" * 200)
        assert len(description) == 150
        assert description == "y" * 147 + "..."


class TestInferCategory:
    """Category rules in priority order."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/home/dev/proj/CLAUDE.md", "core"),
            ("/home/dev/proj/apps/web/AGENTS.md", "core"),
            ("/home/dev/proj/tests/agents/runner.md", "testing"),
            ("/home/dev/proj/agents/helper.md", "general"),
            ("/home/dev/proj/review/agents/style.md", "quality"),
            ("/home/dev/proj/security/agents/audit.md", "security"),
            ("/home/dev/proj/docs/skills/writing.md", "documentation"),
            ("/home/dev/proj/deploy/agents/ship.md", "deployment"),
            ("/home/dev/proj/skills/foo.md", "skill"),
            ("/home/dev/proj/.claude/skills/foo.md", "skill"),
            ("/home/dev/proj/.claude/commands.md", "general"),
            ("/home/dev/proj/testing/CLAUDE.md", "core"),
            ("C:\\Users\\dev\\proj\\Skills\\foo.md", "skill"),
        ],
    )
    def test_rules(self, path: str, expected: str) -> None:
        assert infer_category(path) == expected

    def test_directories_above_project_count(self) -> None:
        assert infer_category("/srv/tests/proj/agents/helper.md") == "testing"

    def test_accepts_path_objects(self) -> None:
        assert infer_category(Path("/home/dev/proj/skills/foo.md")) == "skill"


class TestAgentFileParser:
    """End-to-end parsing of files on disk."""

    def test_front_matter_values_win(self, parser: AgentFileParser, tmp_path: Path) -> None:
        path = write(tmp_path / "src" / "agents" / "code-reviewer.md", REVIEWER_MD)
        record = parser.parse(path, tmp_path)
        assert record.id == "src/agents/code-reviewer"
        assert record.name == "Code Reviewer"
        assert record.description == "Reviews pull requests for style and correctness"
        assert record.category == "quality"
        assert record.tags == ("review", "style")
        assert record.priority is Priority.HIGH
        assert record.estimated_token_count == 250
        assert record.raw_content == REVIEWER_MD
        assert record.file_path == path

    def test_inferred_values_without_header(
        self, parser: AgentFileParser, workspace: Path,
    ) -> None:
        path = write(workspace / "skills" / "ship_helper.md", "# Ship\n\nShip it.\n")
        record = parser.parse(path, workspace)
        assert record.name == "Ship Helper"
        assert record.description == "Ship it."
        assert record.category == "skill"
        assert record.tags == ()
        assert record.priority is None

    def test_token_estimate_fallback(self, parser: AgentFileParser, tmp_path: Path) -> None:
        path = write(tmp_path / "CLAUDE.md", "a" * 400)
        assert parser.parse(path, tmp_path).estimated_token_count == 100

    def test_token_estimate_rounds_up(self, parser: AgentFileParser, tmp_path: Path) -> None:
        path = write(tmp_path / "CLAUDE.md", "a" * 401)
        assert parser.parse(path, tmp_path).estimated_token_count == 101

    def test_token_estimate_counts_header(
        self, parser: AgentFileParser, tmp_path: Path,
    ) -> None:
        content = "---\nname: x\n---\nbody"
        path = write(tmp_path / "CLAUDE.md", content)
        assert parser.parse(path, tmp_path).estimated_token_count == 5

    def test_empty_file(self, parser: AgentFileParser, tmp_path: Path) -> None:
        path = write(tmp_path / "AGENTS.md", "")
        record = parser.parse(path, tmp_path)
        assert record.name == "AGENTS.md (App Instructions)"
        assert record.description == NO_DESCRIPTION
        assert record.estimated_token_count == 0
        assert record.category == "core"

    def test_description_skips_header_block(
        self, parser: AgentFileParser, tmp_path: Path,
    ) -> None:
        path = write(tmp_path / "agents" / "a.md", "---\nname: A\n---\n\nBody line.\n")
        assert parser.parse(path, tmp_path).description == "Body line."

    def test_malformed_header_degrades(
        self,
        parser: AgentFileParser,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        content = "---\nname: [broken\n---\n# Title\nActual description.\n"
        path = write(tmp_path / "agents" / "broken-one.md", content)
        with caplog.at_level(logging.WARNING):
            record = parser.parse(path, tmp_path)
        assert record.name == "Broken One"
        assert record.description == "Actual description."
        assert record.raw_content == content
        assert any("front matter" in r.getMessage() for r in caplog.records)

    def test_non_mapping_header_degrades(
        self, parser: AgentFileParser, tmp_path: Path,
    ) -> None:
        path = write(tmp_path / "agents" / "list.md", "---\n- a\n- b\n---\nText.\n")
        record = parser.parse(path, tmp_path)
        assert record.name == "List"
        assert record.tags == ()

    def test_stat_values(self, parser: AgentFileParser, tmp_path: Path) -> None:
        path = write(tmp_path / "CLAUDE.md", "hello")
        record = parser.parse(path, tmp_path)
        assert record.file_size_bytes == 5
        assert record.last_modified.tzinfo is not None

    def test_stat_failure_uses_defaults(
        self,
        parser: AgentFileParser,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = write(tmp_path / "CLAUDE.md", "hello")

        def failing_stat(self: Path, **kwargs: object) -> None:
            raise OSError("stat failed")

        monkeypatch.setattr(Path, "stat", failing_stat)
        before = datetime.now(timezone.utc)
        record = parser.parse(path, tmp_path)
        assert record.file_size_bytes == 0
        assert record.last_modified >= before

    def test_invalid_utf8_replaced(self, parser: AgentFileParser, tmp_path: Path) -> None:
        path = tmp_path / "CLAUDE.md"
        path.write_bytes(b"Caf\xe9 rules\n")
        record = parser.parse(path, tmp_path)
        assert record.description.startswith("Caf")

    def test_missing_file_raises_parse_error(
        self, parser: AgentFileParser, tmp_path: Path,
    ) -> None:
        with pytest.raises(ParseError):
            parser.parse(tmp_path / "gone.md", tmp_path)

    def test_directory_raises_parse_error(
        self, parser: AgentFileParser, tmp_path: Path,
    ) -> None:
        folder = tmp_path / "agents.md"
        folder.mkdir()
        with pytest.raises(ParseError):
            parser.parse(folder, tmp_path)

    def test_module_shortcut(self, tmp_path: Path) -> None:
        path = write(tmp_path / "CLAUDE.md", "Rules.\n")
        assert parse_agent_file(path, tmp_path).name == "CLAUDE.md (Root Instructions)"

    def test_upper_case_extension_gets_special_name(
        self, parser: AgentFileParser, workspace: Path,
    ) -> None:
        path = write(workspace / "CLAUDE.MD", "Root.\n")
        record = parser.parse(path, workspace)
        assert record.name == "CLAUDE.md (Root Instructions)"
        assert record.category == "core"
