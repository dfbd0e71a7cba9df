"""Self-contained HTML page for selecting agents and previewing the prompt.

Submodules:
    template   -- HTML structure with placeholder markers.
    styles     -- Embedded CSS stylesheet.
    scripts    -- Embedded JavaScript for selection and prompt preview.
    generator  -- Renders the page and injects the agent data.
    server     -- Localhost preview server and browser launcher.
"""

from agent_composer.ui.generator import PageGenerator, inject_agent_data
from agent_composer.ui.server import PreviewServer, find_available_port, open_browser

__all__ = [
    "PageGenerator",
    "PreviewServer",
    "find_available_port",
    "inject_agent_data",
    "open_browser",
]
