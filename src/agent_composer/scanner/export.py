"""JSON serialisation of scan results.

The export is a flat snapshot of ``ScanResult`` with camelCase keys, the
same shape the HTML selection page reads from ``window.__AGENTS_DATA__``.
Datetimes are ISO-8601 strings; an undeclared priority is ``null``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from agent_composer.parsers.base import AgentRecord
from agent_composer.scanner.models import ScanResult

logger = logging.getLogger(__name__)


def agent_to_dict(agent: AgentRecord) -> dict[str, Any]:
    """Convert one record to a JSON-serialisable dict."""
    return {
        "id": agent.id,
        "name": agent.name,
        "description": agent.description,
        "filePath": str(agent.file_path),
        "rawContent": agent.raw_content,
        "fileSizeBytes": agent.file_size_bytes,
        "lastModifiedTimestamp": agent.last_modified.isoformat(),
        "category": agent.category,
        "tags": list(agent.tags),
        "priority": agent.priority.value if agent.priority else None,
        "estimatedTokenCount": agent.estimated_token_count,
    }


def agents_to_list(agents: tuple[AgentRecord, ...] | list[AgentRecord]) -> list[dict[str, Any]]:
    return [agent_to_dict(agent) for agent in agents]


def scan_result_to_dict(result: ScanResult) -> dict[str, Any]:
    """Convert a whole scan result to a JSON-serialisable dict."""
    return {
        "agents": agents_to_list(result.agents),
        "projectPath": str(result.project_path),
        "scannedAt": result.scanned_at.isoformat(),
        "totalFiles": result.total_files,
    }


def scan_result_to_json(result: ScanResult) -> str:
    return json.dumps(scan_result_to_dict(result), indent=2, ensure_ascii=False)


def export_to_json(result: ScanResult, output_path: str | Path) -> Path:
    """Write the scan result as JSON.

    Args:
        result: Scan result to export.
        output_path: Destination file. Parent directories are created.

    Returns:
        The resolved path of the written file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(scan_result_to_json(result) + "\n", encoding="utf-8")
    logger.info("Exported scan result to %s", path)
    return path.resolve()
