"""Render the agent selection page from a scan result.

The ``PageGenerator`` fills the HTML template with the embedded stylesheet
and script, then injects the agent data. The resulting document is
self-contained: it can be written to disk and opened directly, or served
by ``PreviewServer``.

Usage::

    from agent_composer.ui import PageGenerator

    html = PageGenerator().render(scan_result)
"""

from __future__ import annotations

import html as html_mod
import json
import re
from pathlib import Path

from agent_composer.scanner.export import agents_to_list
from agent_composer.scanner.models import ScanResult
from agent_composer.ui.scripts import PAGE_JS
from agent_composer.ui.styles import PAGE_CSS
from agent_composer.ui.template import PAGE_HTML

_HEAD_TAG = re.compile(r"(<head[^>]*>)", re.IGNORECASE)

# Characters that could close the injected <script> element early.
_SCRIPT_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def _script_safe_json(value: object) -> str:
    text = json.dumps(value, ensure_ascii=False)
    for char, escaped in _SCRIPT_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def inject_agent_data(html: str, result: ScanResult) -> str:
    """Insert the agent list and project path as page globals.

    The script defining ``window.__AGENTS_DATA__`` and
    ``window.__PROJECT_PATH__`` goes right after the opening ``<head>``
    tag so it runs before any other script on the page.

    Args:
        html: An HTML document containing a ``<head>`` tag.
        result: Scan result whose agents are embedded.

    Returns:
        The document with the data script inserted. Unchanged if the
        document has no ``<head>`` tag.
    """
    injection = (
        "<script>\n"
        f"window.__AGENTS_DATA__ = {_script_safe_json(agents_to_list(result.agents))};\n"
        f"window.__PROJECT_PATH__ = {_script_safe_json(str(result.project_path))};\n"
        "</script>"
    )
    return _HEAD_TAG.sub(lambda match: f"{match.group(1)}\n{injection}", html, count=1)


class PageGenerator:
    """Render the self-contained selection page.

    Attributes:
        title: Page title shown in the header and ``<title>`` tag.
    """

    def __init__(self, title: str = "Agent Composer") -> None:
        self.title = title

    def render(self, result: ScanResult) -> str:
        """Return the complete HTML document for ``result``."""
        page = PAGE_HTML
        page = page.replace("{{TITLE}}", html_mod.escape(self.title))
        page = page.replace("{{CSS}}", PAGE_CSS)
        page = page.replace("{{JS}}", PAGE_JS)
        return inject_agent_data(page, result)

    def write(self, output_path: str | Path, result: ScanResult) -> Path:
        """Render and write the page, creating parent directories.

        Returns:
            The resolved ``Path`` of the written file.
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(result), encoding="utf-8")
        return path.resolve()
