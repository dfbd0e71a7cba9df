"""``agent-composer compose <directory>`` -- Build a prompt without the UI.

Selects agents by id (``--agent``) and/or category (``--category``); with
no selector every discovered agent is included. The prompt goes to stdout
or to the file given with ``--output``. ``--task`` fills the closing
``# Your Task`` section.

Exit Codes:
    0 -- Prompt generated.
    1 -- Unknown agent id, or the directory could not be scanned.
"""

from __future__ import annotations

from pathlib import Path

import click

from agent_composer.cli.options import scan_options
from agent_composer.exceptions import AgentComposerError
from agent_composer.prompt.generator import (
    estimate_total_tokens,
    generate_prompt,
    select_agents,
)
from agent_composer.scanner.orchestrator import scan_directory


@click.command("compose")
@click.argument(
    "directory",
    type=click.Path(exists=True, file_okay=False),
    default=".",
)
@scan_options
@click.option(
    "--agent", "-a", "agent_ids",
    multiple=True,
    metavar="ID",
    help="Agent id to include (repeatable). See 'scan --format json' for ids.",
)
@click.option(
    "--category", "-c", "categories",
    multiple=True,
    help="Include every agent in this category (repeatable).",
)
@click.option(
    "--task", "-t",
    default=None,
    metavar="TEXT",
    help="Text for the closing '# Your Task' section of the prompt.",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the prompt to this file instead of stdout.",
)
def compose_command(
    directory: str,
    ignore: tuple[str, ...],
    max_depth: int,
    agent_ids: tuple[str, ...],
    categories: tuple[str, ...],
    task: str | None,
    output: str | None,
) -> None:
    """Compose the agent files in DIRECTORY into one instruction prompt."""
    try:
        result = scan_directory(directory, ignore, max_depth)
        selected = select_agents(result, agent_ids, categories)
    except AgentComposerError as exc:
        raise click.ClickException(str(exc)) from exc

    prompt = generate_prompt(selected, task)

    if output is None:
        click.echo(prompt)
        return

    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(prompt, encoding="utf-8")
    click.echo(
        f"Prompt written to: {path.resolve()} "
        f"({len(selected)} agents, ~{estimate_total_tokens(selected):,} tokens)"
    )
