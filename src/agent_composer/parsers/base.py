"""Data structures produced by the agent file parser.

``AgentRecord`` is the single representation of a parsed agent file that
every downstream consumer works with: the console formatter, the JSON
export, the prompt composer and the HTML selection page. Records are
frozen; a rescan builds a fresh set rather than updating old ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class Priority(str, Enum):
    """Priority an agent file may declare in its front matter."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_value(cls, value: object) -> Priority | None:
        """Return the matching priority, or None for anything unrecognised."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class AgentRecord:
    """One parsed agent instruction file.

    Attributes:
        id: Stable slug derived from the root-relative path
            (e.g. ``"src/agents/code-reviewer"``).
        name: Display name. Never empty.
        description: One-line summary. Never empty.
        file_path: Absolute path to the file on disk.
        raw_content: Full file text, front matter included.
        file_size_bytes: Size reported by the filesystem (0 if unknown).
        last_modified: Modification time as a timezone-aware datetime.
        category: Grouping label such as ``"core"`` or ``"testing"``.
        tags: Free-form labels from the front matter, in declared order.
        priority: Declared priority, or None when the file declares none.
        estimated_token_count: Approximate prompt size in tokens.
    """

    id: str
    name: str
    description: str
    file_path: Path
    raw_content: str
    file_size_bytes: int
    last_modified: datetime
    category: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    priority: Priority | None = None
    estimated_token_count: int = 0
