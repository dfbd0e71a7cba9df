"""Click options shared by every command that scans a directory."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

from agent_composer.discovery.walker import DEFAULT_MAX_DEPTH

F = TypeVar("F", bound=Callable[..., object])


def scan_options(func: F) -> F:
    """Add ``--ignore`` and ``--max-depth`` to a command."""
    func = click.option(
        "--max-depth",
        type=click.IntRange(min=0),
        default=DEFAULT_MAX_DEPTH,
        show_default=True,
        help="Deepest directory level to descend into (0 = root only).",
    )(func)
    func = click.option(
        "--ignore", "-i",
        multiple=True,
        metavar="PATTERN",
        help="Extra ignore pattern (repeatable), added to node_modules, .git, dist...",
    )(func)
    return func
