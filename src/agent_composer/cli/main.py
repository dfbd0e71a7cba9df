"""Agent Composer CLI -- compose agent instruction files into prompts.

Entry point for the ``agent-composer`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan     -- Discover agent files, print them, and serve the selection page.
    compose  -- Build a prompt from selected agents without the UI.
    page     -- Write the selection page as a standalone HTML file.

Usage::

    agent-composer scan                       # Scan cwd, open the UI
    agent-composer scan ./repo --no-serve -o agents.json
    agent-composer compose ./repo -c core -c testing -o prompt.md
    agent-composer page ./repo --open
"""

from __future__ import annotations

import logging

import click

from agent_composer import __version__
from agent_composer.cli.compose_cmd import compose_command
from agent_composer.cli.page_cmd import page_command
from agent_composer.cli.scan import scan_command


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log progress and debug details to stderr.",
)
def cli(verbose: bool) -> None:
    """Agent Composer: compose agent instruction files into one prompt.

    Finds CLAUDE.md, AGENTS.md and agent/skill Markdown files in a project
    and combines a selection of them into a single instruction document.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(compose_command)
cli.add_command(page_command)
