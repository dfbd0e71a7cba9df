"""``agent-composer page <directory>`` -- Write the selection page to disk.

Produces the same self-contained HTML document that ``scan`` serves, for
opening straight from the filesystem without a server.

Exit Codes:
    0 -- Page written.
    1 -- The directory could not be scanned.
"""

from __future__ import annotations

from pathlib import Path

import click

from agent_composer.cli.options import scan_options
from agent_composer.exceptions import AgentComposerError
from agent_composer.scanner.orchestrator import scan_directory
from agent_composer.ui.generator import PageGenerator
from agent_composer.ui.server import open_browser

_DEFAULT_OUTPUT = "agent-composer.html"


@click.command("page")
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False),
    default=".",
)
@scan_options
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help=f"Output HTML file path (default: DIRECTORY/{_DEFAULT_OUTPUT}).",
)
@click.option(
    "--title", "-t",
    type=str,
    default="Agent Composer",
    help="Page title shown in the HTML header.",
)
@click.option(
    "--open", "open_page",
    is_flag=True,
    default=False,
    help="Open the page in the default browser after writing it.",
)
def page_command(
    directory: str,
    ignore: tuple[str, ...],
    max_depth: int,
    output: str | None,
    title: str,
    open_page: bool,
) -> None:
    """Write the agent selection page for DIRECTORY as a standalone HTML file."""
    try:
        result = scan_directory(directory, ignore, max_depth)
    except AgentComposerError as exc:
        raise click.ClickException(str(exc)) from exc

    out_path = Path(output) if output else Path(directory) / _DEFAULT_OUTPUT
    resolved = PageGenerator(title=title).write(out_path, result)

    click.echo(f"Page generated: {resolved}")
    click.echo(f"  Agents: {result.agent_count}")

    if open_page:
        open_browser(resolved.as_uri())
