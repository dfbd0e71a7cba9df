"""Tests for the agent selection page renderer."""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path

import pytest

from agent_composer.parsers.base import AgentRecord
from agent_composer.scanner.models import ScanResult
from agent_composer.scanner.orchestrator import scan_directory
from agent_composer.ui.generator import PageGenerator, inject_agent_data

_DATA_LINE = re.compile(r"window\.__AGENTS_DATA__ = (.*);\n")


def _result_with(raw_content: str) -> ScanResult:
    agent = AgentRecord(
        id="x",
        name="X",
        description="d",
        file_path=Path("/p/x.md"),
        raw_content=raw_content,
        file_size_bytes=len(raw_content),
        last_modified=datetime(2024, 1, 1, tzinfo=timezone.utc),
        category="general",
    )
    return ScanResult(
        agents=(agent,),
        project_path=Path("/p"),
        scanned_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        total_files=1,
    )


@pytest.fixture
def page(project_dir: Path) -> str:
    return PageGenerator().render(scan_directory(project_dir))


class TestPageGenerator:
    """Rendered document structure."""

    def test_is_html_document(self, page: str) -> None:
        assert page.startswith("<!DOCTYPE html>")
        assert page.rstrip().endswith("</html>")

    def test_placeholders_filled(self, page: str) -> None:
        assert "{{TITLE}}" not in page
        assert "{{CSS}}" not in page
        assert "{{JS}}" not in page

    def test_data_injected_after_head(self, page: str) -> None:
        head = page.index("<head>")
        data = page.index("window.__AGENTS_DATA__")
        first_meta = page.index("<meta")
        assert head < data < first_meta

    def test_embedded_data_parses(self, page: str, project_dir: Path) -> None:
        match = _DATA_LINE.search(page)
        assert match is not None
        agents = json.loads(match.group(1))
        assert len(agents) == 5
        assert {"id", "rawContent", "estimatedTokenCount"} <= set(agents[0])

    def test_project_path_embedded(self, page: str, project_dir: Path) -> None:
        assert json.dumps(str(project_dir.resolve())) in page

    def test_title_escaped(self, project_dir: Path) -> None:
        html = PageGenerator(title="A <b> & C").render(scan_directory(project_dir))
        assert "<title>A &lt;b&gt; &amp; C</title>" in html

    def test_write_creates_file(self, project_dir: Path, tmp_path: Path) -> None:
        result = scan_directory(project_dir)
        written = PageGenerator().write(tmp_path / "site" / "index.html", result)
        assert written.is_file()
        assert "window.__AGENTS_DATA__" in written.read_text(encoding="utf-8")


class TestPageControls:
    """Task box and keyboard shortcuts on the rendered page."""

    def test_task_box_present(self, page: str) -> None:
        assert '<textarea id="user-prompt"' in page
        assert '<label for="user-prompt">Your Task</label>' in page

    def test_task_text_feeds_prompt(self, page: str) -> None:
        assert "state.task=taskEl.value" in page
        assert "generatePrompt(selectedAgents(),state.task)" in page
        assert '(task||"").trim()||"[Describe your task here]"' in page

    @pytest.mark.parametrize(
        "binding",
        [
            '{key:"d",shift:false,run:downloadPrompt}',
            '{key:"a",shift:true,run:selectAll}',
            '{key:"e",shift:true,run:selectNone}',
            '{key:"f",shift:false,run:focusSearch}',
        ],
    )
    def test_shortcut_bound(self, page: str, binding: str) -> None:
        assert binding in page

    def test_shortcuts_accept_ctrl_or_cmd(self, page: str) -> None:
        assert "e.ctrlKey||e.metaKey" in page


class TestInjectAgentData:
    """Script-safe embedding of file contents."""

    def test_closing_script_tag_escaped(self) -> None:
        html = inject_agent_data("<html><head></head></html>", _result_with("</script><b>"))
        injected = html.split("<head>", 1)[1]
        assert injected.count("</script>") == 1
        assert "\\u003c/script\\u003e" in injected

    def test_escaped_data_decodes_to_original(self) -> None:
        html = inject_agent_data("<head>", _result_with("a < b && c > d"))
        agents = json.loads(_DATA_LINE.search(html).group(1))
        assert agents[0]["rawContent"] == "a < b && c > d"

    def test_head_with_attributes(self) -> None:
        html = inject_agent_data('<head lang="en"><title>t</title>', _result_with(""))
        assert html.index("__AGENTS_DATA__") < html.index("<title>")

    def test_only_first_head_used(self) -> None:
        html = inject_agent_data("<head></head><head></head>", _result_with(""))
        assert html.count("__AGENTS_DATA__") == 1

    def test_no_head_unchanged(self) -> None:
        assert inject_agent_data("<p>x</p>", _result_with("")) == "<p>x</p>"
