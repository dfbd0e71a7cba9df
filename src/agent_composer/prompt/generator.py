"""Compose selected agent files into one instruction prompt.

The prompt is plain Markdown::

    # Agent Instructions

    Generated with 2 agent(s)

    ---

    ## CLAUDE.md (Root Instructions)

    **Metadata:**
    - Category: core
    - Path: /project/CLAUDE.md

    <file body without front matter>

    ---
    ...
    # Your Task

    [Describe your task here]

Core agents come first; the rest keep their relative order within each
category. The HTML selection page builds the same document in JavaScript.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from agent_composer.exceptions import AgentComposerError
from agent_composer.parsers.base import AgentRecord
from agent_composer.parsers.frontmatter import split_front_matter
from agent_composer.scanner.models import ScanResult

CORE_CATEGORY = "core"

TASK_PLACEHOLDER = "[Describe your task here]"

EMPTY_PROMPT = (
    "# No agents selected\n\n"
    "Please select at least one agent to generate a prompt."
)


def _prompt_order(agent: AgentRecord) -> tuple[bool, str]:
    return (agent.category != CORE_CATEGORY, (agent.category or "").casefold())


def _body(agent: AgentRecord) -> str:
    _, body = split_front_matter(agent.raw_content)
    return body.strip()


def _metadata_lines(agent: AgentRecord) -> list[str]:
    metadata: list[str] = []
    if agent.category:
        metadata.append(f"Category: {agent.category}")
    if agent.priority:
        metadata.append(f"Priority: {agent.priority.value}")
    if agent.tags:
        metadata.append(f"Tags: {', '.join(agent.tags)}")
    metadata.append(f"Path: {agent.file_path}")
    return metadata


def generate_prompt(agents: Sequence[AgentRecord], task: str | None = None) -> str:
    """Build the combined instruction document for ``agents``.

    Args:
        agents: Selected records, in any order.
        task: Text for the closing ``# Your Task`` section. Blank or missing
            text leaves ``TASK_PLACEHOLDER`` there.

    Returns:
        Markdown prompt text. A placeholder notice when nothing is selected.
    """
    if not agents:
        return EMPTY_PROMPT

    lines: list[str] = [
        "# Agent Instructions",
        "",
        f"Generated with {len(agents)} agent(s)",
        "",
        "---",
        "",
    ]

    for agent in sorted(agents, key=_prompt_order):
        lines.append(f"## {agent.name}")
        lines.append("")
        lines.append("**Metadata:**")
        lines.extend(f"- {item}" for item in _metadata_lines(agent))
        lines.append("")
        lines.append(_body(agent))
        lines.append("")
        lines.append("---")
        lines.append("")

    task_text = (task or "").strip() or TASK_PLACEHOLDER
    lines.extend(["# Your Task", "", task_text, ""])
    return "\n".join(lines)


def estimate_total_tokens(agents: Iterable[AgentRecord]) -> int:
    """Sum the token estimates of ``agents``."""
    return sum(agent.estimated_token_count for agent in agents)


def select_agents(
    result: ScanResult,
    ids: Iterable[str] = (),
    categories: Iterable[str] = (),
) -> list[AgentRecord]:
    """Pick agents from a scan result by id and/or category.

    With neither ids nor categories every agent is selected. Otherwise an
    agent is selected when its id is listed or its category is listed
    (categories compare case-insensitively). Scan order is preserved.

    Raises:
        AgentComposerError: If any requested id is not in the result.
    """
    wanted_ids = list(dict.fromkeys(ids))
    wanted_categories = {category.casefold() for category in categories}
    if not wanted_ids and not wanted_categories:
        return list(result.agents)

    known = {agent.id for agent in result.agents}
    missing = [agent_id for agent_id in wanted_ids if agent_id not in known]
    if missing:
        raise AgentComposerError(f"Unknown agent id(s): {', '.join(missing)}")

    return [
        agent
        for agent in result.agents
        if agent.id in wanted_ids
        or (agent.category or "").casefold() in wanted_categories
    ]
