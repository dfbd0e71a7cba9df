"""Data models for the scanner module.

Contains ``ScanResult``, the aggregate produced by one scan of a project.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from agent_composer.parsers.base import AgentRecord

UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class ScanResult:
    """Complete result of scanning one project directory.

    Attributes:
        agents: Parsed records sorted by category, then name.
        project_path: Absolute path of the scanned root.
        scanned_at: When the scan finished (UTC).
        total_files: Number of files the walker visited, including files
            that were not agent files and files that failed to parse.
    """

    agents: tuple[AgentRecord, ...]
    project_path: Path
    scanned_at: datetime
    total_files: int

    @property
    def agent_count(self) -> int:
        return len(self.agents)

    @property
    def total_estimated_tokens(self) -> int:
        return sum(agent.estimated_token_count for agent in self.agents)

    def by_category(self) -> dict[str, list[AgentRecord]]:
        """Group agents by category, keys in alphabetical order."""
        groups: dict[str, list[AgentRecord]] = {}
        for agent in self.agents:
            groups.setdefault(agent.category or UNCATEGORIZED, []).append(agent)
        return {key: groups[key] for key in sorted(groups)}

    def get(self, agent_id: str) -> AgentRecord | None:
        """Look up an agent by id."""
        for agent in self.agents:
            if agent.id == agent_id:
                return agent
        return None
