"""Project scanning: the discover, classify, parse and sort pipeline.

Public API::

    from agent_composer.scanner import scan_directory

    result = scan_directory("/path/to/project")
    for category, agents in result.by_category().items():
        print(category, [agent.name for agent in agents])
"""

from __future__ import annotations

from agent_composer.scanner.export import export_to_json, scan_result_to_dict
from agent_composer.scanner.models import ScanResult
from agent_composer.scanner.orchestrator import Scanner, scan_directory, sort_agents

__all__ = [
    "ScanResult",
    "Scanner",
    "export_to_json",
    "scan_directory",
    "scan_result_to_dict",
    "sort_agents",
]
