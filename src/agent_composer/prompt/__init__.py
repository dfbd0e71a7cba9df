"""Prompt composition from selected agent records."""

from agent_composer.prompt.generator import (
    EMPTY_PROMPT,
    estimate_total_tokens,
    generate_prompt,
    select_agents,
)

__all__ = [
    "EMPTY_PROMPT",
    "estimate_total_tokens",
    "generate_prompt",
    "select_agents",
]
