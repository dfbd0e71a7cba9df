"""``agent-composer scan [directory]`` -- Discover agent files and open the UI.

Scans the directory, prints the agents grouped by category (or JSON with
``--format json``), optionally exports the result to a JSON file, and then
serves the selection page on localhost unless ``--no-serve`` is given.

Exit Codes:
    0 -- Scan completed (also when no agent files were found).
    1 -- The directory could not be scanned or the server failed to start.
"""

from __future__ import annotations

import click

from agent_composer.cli.options import scan_options
from agent_composer.exceptions import AgentComposerError
from agent_composer.scanner.export import export_to_json, scan_result_to_json
from agent_composer.scanner.models import ScanResult
from agent_composer.scanner.orchestrator import scan_directory
from agent_composer.ui.generator import PageGenerator
from agent_composer.ui.server import DEFAULT_PORT, PreviewServer, open_browser


def _serve(result: ScanResult, port: int, open_page: bool, err: bool = False) -> None:
    """Serve the selection page until Ctrl+C.

    Args:
        result: Scan result embedded in the page.
        port: Preferred port; the next free one is used if it is busy.
        open_page: Whether to open the page in the default browser.
        err: Write status messages to stderr, keeping stdout for JSON.
    """
    html = PageGenerator().render(result)
    server = PreviewServer(html, port=port)
    if server.port != port:
        click.echo(f"Port {port} is busy, using {server.port} instead", err=True)

    click.echo(f"Server running at {server.url}", err=err)
    click.echo(
        f"Loaded {result.agent_count} agents from {result.project_path}", err=err,
    )
    click.echo("Press Ctrl+C to stop the server", err=err)

    if open_page:
        open_browser(server.url)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        click.echo("\nServer stopped.", err=err)


@click.command("scan")
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
    help="Export the scan result to this JSON file.",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Console output format: text (default) or json.",
)
@click.option(
    "--serve/--no-serve",
    default=True,
    help="Serve the selection page after scanning (default: serve).",
)
@click.option(
    "--port", "-p",
    type=click.IntRange(1, 65535),
    default=DEFAULT_PORT,
    show_default=True,
    help="Preferred port for the selection page server.",
)
@click.option(
    "--open/--no-open", "open_page",
    default=True,
    help="Open the selection page in the default browser.",
)
def scan_command(
    directory: str,
    ignore: tuple[str, ...],
    max_depth: int,
    output: str | None,
    output_format: str,
    serve: bool,
    port: int,
    open_page: bool,
) -> None:
    """Scan DIRECTORY for agent files and open the selection page.

    Recognised files: CLAUDE.md, AGENTS.md, agents/*.md, skills/*.md and
    .claude/*.md. DIRECTORY defaults to the current directory.
    """
    try:
        result = scan_directory(directory, ignore, max_depth)
    except AgentComposerError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(scan_result_to_json(result))
    else:
        from agent_composer.cli.output import print_scan_results
        print_scan_results(result)

    if output:
        written = export_to_json(result, output)
        click.echo(f"Exported to: {written}", err=output_format == "json")

    if serve:
        try:
            _serve(result, port, open_page, err=output_format == "json")
        except AgentComposerError as exc:
            raise click.ClickException(str(exc)) from exc
