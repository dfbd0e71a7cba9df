"""HTML template for the agent selection page.

The template is a complete HTML5 document with placeholders for:
    ``{{TITLE}}`` -- page title (HTML-escaped by the generator).
    ``{{CSS}}``   -- embedded stylesheet (from styles module).
    ``{{JS}}``    -- embedded script (from scripts module).

Agent data is not a placeholder: ``inject_agent_data`` inserts a script
that defines ``window.__AGENTS_DATA__`` and ``window.__PROJECT_PATH__``
right after the opening ``<head>`` tag, before the page script runs.
"""

from __future__ import annotations

PAGE_HTML: str = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width,initial-scale=1">
<title>{{TITLE}}</title>
<style>
{{CSS}}
</style>
</head>
<body>

<div class="header">
  <div>
    <h1>{{TITLE}}</h1>
    <div class="subtitle" id="project-path"></div>
  </div>
  <div class="totals" id="totals"></div>
</div>

<div class="container">

  <div class="panel list-panel">
    <div class="toolbar">
      <input id="search" type="search" placeholder="Search agents (/ or Ctrl+F)" autocomplete="off">
      <button id="select-all" type="button">All</button>
      <button id="select-none" type="button">None</button>
    </div>
    <div id="agent-list"></div>
  </div>

  <div class="panel preview-panel">
    <div class="toolbar">
      <h2>Prompt Preview</h2>
      <span class="spacer"></span>
      <button id="copy" type="button">Copy</button>
      <button id="download" type="button">Download</button>
    </div>
    <div class="task">
      <label for="user-prompt">Your Task</label>
      <textarea id="user-prompt" rows="3"
        placeholder="Describe what you want to accomplish (e.g., add a login page with tests)"></textarea>
      <div class="hint">Enter your task, then select agents to help complete it</div>
    </div>
    <pre id="prompt"></pre>
    <div class="shortcuts">Ctrl+D download · Ctrl+Shift+A select all · Ctrl+Shift+E deselect all · Ctrl+F search</div>
  </div>

</div><!-- /container -->

<script>
{{JS}}
</script>
</body>
</html>"""
