"""Agent Composer: discover agent instruction files and compose them into prompts."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
