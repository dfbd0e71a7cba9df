"""Metadata extraction for a single agent instruction file.

``AgentFileParser.parse`` turns one Markdown file into an ``AgentRecord``.
Each record field is resolved independently: an explicit front matter value
wins, otherwise the field is inferred from the path or the body text.

Inference Rules
---------------
- **id** -- root-relative path, ``/``-separated, ``.md`` dropped, every
  character outside ``[a-z0-9/]`` replaced by ``-``, lower-cased.
- **name** -- ``CLAUDE.md``/``AGENTS.md`` get fixed display names; other
  files use the title-cased file stem (``code-reviewer`` -> ``Code Reviewer``).
- **description** -- first body line that is neither blank nor a heading,
  truncated to 150 characters.
- **category** -- first fragment from ``CATEGORY_RULES`` found in the
  lower-cased absolute path, else ``"general"``.
- **estimated_token_count** -- ``ceil(len(text) / 4)``. This is a rough
  rule of thumb, not a tokenizer.

Only an unreadable file raises (``ParseError``). Broken front matter is
logged and the file is parsed as if it had none.
"""

from __future__ import annotations

import logging
import math
import os
import re
from datetime import datetime, timezone
from pathlib import Path

from agent_composer.exceptions import FrontMatterError, ParseError
from agent_composer.parsers.base import AgentRecord
from agent_composer.parsers.frontmatter import (
    FrontMatterHeader,
    parse_header,
    split_front_matter,
)

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available"

MAX_DESCRIPTION_LENGTH = 150
_ELLIPSIS = "..."

CHARS_PER_TOKEN = 4

# Ordered (fragment, category) pairs; the first fragment found wins.
CATEGORY_RULES: tuple[tuple[str, str], ...] = (
    ("claude.md", "core"),
    ("agents.md", "core"),
    ("/test", "testing"),
    ("/review", "quality"),
    ("/security", "security"),
    ("/doc", "documentation"),
    ("/deploy", "deployment"),
    ("/skill", "skill"),
)

DEFAULT_CATEGORY = "general"

_SPECIAL_NAMES: dict[str, str] = {
    "claude": "CLAUDE.md (Root Instructions)",
    "agents": "AGENTS.md (App Instructions)",
}

_ID_UNSAFE = re.compile(r"[^a-z0-9/]", re.IGNORECASE)
_MD_SUFFIX = re.compile(r"\.md$")


def _relative_posix(path: Path, root: Path) -> str:
    return os.path.relpath(path, root).replace("\\", "/")


def generate_id(path: Path, root: Path) -> str:
    """Derive a stable slug from the path relative to ``root``.

    Example: ``src/agents/Code_Reviewer.md`` -> ``src/agents/code-reviewer``.
    """
    relative = _MD_SUFFIX.sub("", _relative_posix(path, root))
    return _ID_UNSAFE.sub("-", relative).lower()


def name_from_path(path: Path) -> str:
    """Build a display name from the file name."""
    name = path.name
    stem = name[:-3] if name.lower().endswith(".md") else name
    special = _SPECIAL_NAMES.get(stem.lower())
    if special is not None:
        return special

    words = re.sub(r"[-_]", " ", stem).split(" ")
    title = " ".join(word[:1].upper() + word[1:] for word in words)
    return title if title.strip() else name


def extract_description(body: str) -> str:
    """Return the first non-heading line of ``body``, truncated if needed.

    Args:
        body: Markdown text without front matter.

    Returns:
        At most ``MAX_DESCRIPTION_LENGTH`` characters, or ``NO_DESCRIPTION``
        when the body has no prose line.
    """
    for line in body.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if len(stripped) > MAX_DESCRIPTION_LENGTH:
            cut = MAX_DESCRIPTION_LENGTH - len(_ELLIPSIS)
            return stripped[:cut] + _ELLIPSIS
        return stripped
    return NO_DESCRIPTION


def infer_category(path: str | os.PathLike[str]) -> str:
    """Infer a category from the absolute file path.

    The whole path is searched, so directories above the scan root count:
    scanning a ``skills/`` directory directly still yields ``"skill"``.
    """
    lowered = str(path).replace("\\", "/").lower()
    for fragment, category in CATEGORY_RULES:
        if fragment in lowered:
            return category
    return DEFAULT_CATEGORY


def estimate_tokens(text: str) -> int:
    """Approximate the token count of ``text`` at four characters per token."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)


class AgentFileParser:
    """Parses agent instruction files into ``AgentRecord`` instances.

    The parser is stateless and can be shared across scans.

    Parse logic per file:
        1. Read the text and stat the file.
        2. Split off the front matter and validate it.
        3. Resolve each record field: header value, else inferred value.
    """

    def parse(self, path: Path, root: Path) -> AgentRecord:
        """Parse one agent file.

        Args:
            path: Absolute path of the file.
            root: Scan root the record id is made relative to.

        Returns:
            The parsed record.

        Raises:
            ParseError: If the file cannot be read.
        """
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ParseError(f"Could not read agent file {path}: {exc}") from exc

        size, modified = self._stat(path)
        header, body = self._split(path, text)

        return AgentRecord(
            id=generate_id(path, root),
            name=header.name or name_from_path(path),
            description=header.description or extract_description(body),
            file_path=path,
            raw_content=text,
            file_size_bytes=size,
            last_modified=modified,
            category=header.category or infer_category(path),
            tags=header.tags if header.tags is not None else (),
            priority=header.priority,
            estimated_token_count=header.estimated_tokens or estimate_tokens(text),
        )

    @staticmethod
    def _stat(path: Path) -> tuple[int, datetime]:
        """Return size and mtime, substituting 0 and now if stat fails."""
        try:
            stat = path.stat()
        except OSError:
            logger.debug("Could not stat %s; using defaults", path)
            return 0, datetime.now(timezone.utc)
        return stat.st_size, datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)

    @staticmethod
    def _split(path: Path, text: str) -> tuple[FrontMatterHeader, str]:
        """Return the validated header and the body used for descriptions.

        A fenced block is always removed from the description source, even
        when its YAML is invalid, so the fence lines never become the
        description.
        """
        header_text, body = split_front_matter(text)
        if header_text is None:
            return FrontMatterHeader(), body
        try:
            return parse_header(header_text), body
        except FrontMatterError as exc:
            logger.warning("Could not parse front matter in %s: %s", path, exc)
            return FrontMatterHeader(), body


def parse_agent_file(path: Path, root: Path) -> AgentRecord:
    """Parse one agent file with a default ``AgentFileParser``."""
    return AgentFileParser().parse(path, root)
