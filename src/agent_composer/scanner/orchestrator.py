"""Scan pipeline: walk, classify, parse, sort.

Discovery Algorithm:
    1. Resolve the root to an absolute path.
    2. ``DirectoryWalker`` lists every non-ignored file.
    3. ``is_agent_file`` keeps the agent instruction files.
    4. ``AgentFileParser`` parses each one; a file that cannot be read is
       logged and dropped.
    5. Colliding ids get a numeric suffix so ids stay unique per scan.
    6. Records are sorted by category, then name.

Only an unreadable root aborts the scan (``RootUnreadableError``). The
pipeline is sequential and keeps no state between calls, so scanning the
same unchanged tree twice yields the same records in the same order.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from agent_composer.discovery.patterns import is_agent_file
from agent_composer.discovery.walker import DEFAULT_MAX_DEPTH, DirectoryWalker
from agent_composer.exceptions import ParseError
from agent_composer.parsers.agent_file import AgentFileParser
from agent_composer.parsers.base import AgentRecord
from agent_composer.scanner.models import ScanResult

logger = logging.getLogger(__name__)


def sort_key(agent: AgentRecord) -> tuple[str, str, str, str]:
    """Sort key ordering by category, then name.

    Each field compares case-insensitively first. The exact string is a
    deterministic tie-break by code point, not a locale order, so ``"A"``
    sorts before ``"a"``. A missing category sorts as "".
    """
    category = agent.category or ""
    return (category.casefold(), category, agent.name.casefold(), agent.name)


def sort_agents(agents: Iterable[AgentRecord]) -> list[AgentRecord]:
    return sorted(agents, key=sort_key)


def deduplicate_ids(agents: list[AgentRecord]) -> list[AgentRecord]:
    """Suffix repeated ids with ``-2``, ``-3``... in the given order.

    Distinct paths such as ``a_b.md`` and ``a-b.md`` slug to the same id.
    """
    taken = {agent.id for agent in agents}
    seen: set[str] = set()
    unique: list[AgentRecord] = []
    for agent in agents:
        if agent.id not in seen:
            seen.add(agent.id)
            unique.append(agent)
            continue
        counter = 2
        while f"{agent.id}-{counter}" in taken:
            counter += 1
        new_id = f"{agent.id}-{counter}"
        taken.add(new_id)
        seen.add(new_id)
        logger.debug("Duplicate id %s for %s; using %s", agent.id, agent.file_path, new_id)
        unique.append(dataclasses.replace(agent, id=new_id))
    return unique


class Scanner:
    """Runs the discover -> classify -> parse pipeline over a directory.

    Usage::

        scanner = Scanner(extra_ignore_patterns=["vendor"])
        result = scanner.scan(Path("."))
        for agent in result.agents:
            print(f"{agent.category}: {agent.name}")
    """

    def __init__(
        self,
        extra_ignore_patterns: Iterable[str] = (),
        max_depth: int = DEFAULT_MAX_DEPTH,
        parser: AgentFileParser | None = None,
    ) -> None:
        self.walker = DirectoryWalker(extra_ignore_patterns, max_depth)
        self.parser = parser if parser is not None else AgentFileParser()

    def scan(self, root: str | Path) -> ScanResult:
        """Scan ``root`` for agent files.

        Args:
            root: Directory to scan; relative paths are resolved.

        Returns:
            A ``ScanResult`` with sorted records and the walked file count.

        Raises:
            RootUnreadableError: If ``root`` cannot be listed.
        """
        project_path = Path(root).resolve()
        logger.info("Scanning directory: %s", project_path)

        candidates = self.walker.discover(project_path)
        agent_paths = [path for path in candidates if is_agent_file(path)]
        logger.info(
            "Found %d agent files among %d files", len(agent_paths), len(candidates),
        )

        agents = self._parse_all(agent_paths, project_path)
        logger.info("Parsed %d agents successfully", len(agents))

        return ScanResult(
            agents=tuple(sort_agents(deduplicate_ids(agents))),
            project_path=project_path,
            scanned_at=datetime.now(timezone.utc),
            total_files=len(candidates),
        )

    def _parse_all(self, paths: list[Path], root: Path) -> list[AgentRecord]:
        agents: list[AgentRecord] = []
        for path in paths:
            try:
                agents.append(self.parser.parse(path, root))
            except ParseError as exc:
                logger.warning("Skipping agent file %s: %s", path, exc)
        return agents


def scan_directory(
    root: str | Path,
    extra_ignore_patterns: Iterable[str] = (),
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ScanResult:
    """Scan ``root`` with a one-off ``Scanner``."""
    return Scanner(extra_ignore_patterns, max_depth).scan(root)
