"""Rich output formatting helpers for the Agent Composer CLI.

Scan results are printed as a summary panel followed by one table per
category. Category headers use a fixed colour per known category so the
same kind of agent always looks the same across runs.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agent_composer.discovery.patterns import EXPECTED_PATTERNS
from agent_composer.scanner.models import ScanResult

_CATEGORY_STYLES: dict[str, str] = {
    "core": "bold magenta",
    "testing": "green",
    "quality": "cyan",
    "security": "bold red",
    "documentation": "blue",
    "deployment": "yellow",
    "skill": "bright_cyan",
    "general": "white",
}

console = Console()


def category_style(category: str) -> str:
    """Return the Rich style string for a category name."""
    return _CATEGORY_STYLES.get(category, "white")


def print_scan_results(result: ScanResult) -> None:
    """Print the scan summary and the agents grouped by category.

    Args:
        result: Result of scanning one project.
    """
    header = Text.assemble(
        ("Project: ", "bold"), (str(result.project_path), ""),
        ("\nTotal files: ", "bold"), (str(result.total_files), ""),
        ("\nAgents parsed: ", "bold"), (str(result.agent_count), "green"),
    )
    console.print(Panel(header, title="Agent Composer Scan Results"))

    if not result.agents:
        _print_expected_patterns()
        return

    for category, agents in result.by_category().items():
        table = Table(
            title=Text(f"{category.upper()} ({len(agents)})", style=category_style(category)),
            show_header=True,
            header_style="bold",
            title_justify="left",
        )
        table.add_column("Name", style="bold")
        table.add_column("Description")
        table.add_column("Path", style="dim")
        table.add_column("Tags")
        table.add_column("Tokens", justify="right")
        # File content is shown as plain text, never parsed as Rich markup.
        for agent in agents:
            table.add_row(
                Text(agent.name),
                Text(agent.description),
                Text(str(agent.file_path)),
                Text(", ".join(agent.tags) or "-"),
                f"~{agent.estimated_token_count:,}",
            )
        console.print(table)

    console.print(
        f"[bold]{result.agent_count}[/bold] agents | "
        f"~{result.total_estimated_tokens:,} tokens total"
    )


def _print_expected_patterns() -> None:
    console.print("[yellow]No agent files found.[/yellow]")
    console.print("Expected patterns:")
    for pattern, meaning in EXPECTED_PATTERNS:
        console.print(f"  - {pattern} ({meaning})")

