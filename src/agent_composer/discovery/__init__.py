"""File discovery: directory walking and agent file classification.

Public API::

    from agent_composer.discovery import DirectoryWalker, is_agent_file

    walker = DirectoryWalker(extra_ignore_patterns=["vendor"])
    agent_paths = [p for p in walker.discover(root) if is_agent_file(p)]
"""

from __future__ import annotations

from agent_composer.discovery.patterns import (
    DEFAULT_IGNORE_PATTERNS,
    EXPECTED_PATTERNS,
    is_agent_file,
    merge_ignore_patterns,
    should_ignore,
)
from agent_composer.discovery.walker import DEFAULT_MAX_DEPTH, DirectoryWalker, discover

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "DEFAULT_MAX_DEPTH",
    "DirectoryWalker",
    "EXPECTED_PATTERNS",
    "discover",
    "is_agent_file",
    "merge_ignore_patterns",
    "should_ignore",
]
