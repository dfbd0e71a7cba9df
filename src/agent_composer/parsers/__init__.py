"""Agent file parsing: front matter handling and metadata extraction."""

from agent_composer.parsers.agent_file import AgentFileParser, parse_agent_file
from agent_composer.parsers.base import AgentRecord, Priority
from agent_composer.parsers.frontmatter import (
    FrontMatterHeader,
    parse_header,
    split_front_matter,
)

__all__ = [
    "AgentFileParser",
    "AgentRecord",
    "FrontMatterHeader",
    "Priority",
    "parse_agent_file",
    "parse_header",
    "split_front_matter",
]
