"""YAML front matter splitting and validation.

Agent files may start with a YAML block fenced by ``---`` lines::

    ---
    name: Code Reviewer
    category: quality
    tags: [review, style]
    priority: high
    estimatedTokens: 1200
    ---

    # Code Reviewer
    ...

Splitting is purely lexical: the first line must be ``---`` and a later
line must be ``---`` as well. The enclosed text is then loaded with
``yaml.safe_load``. The loaded mapping is never trusted as-is; each known
key is validated into the typed ``FrontMatterHeader`` and values of the
wrong type are treated as absent.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import yaml

from agent_composer.exceptions import FrontMatterError
from agent_composer.parsers.base import Priority

_FENCE = "---"
_BOM = "\ufeff"


@dataclass(frozen=True)
class FrontMatterHeader:
    """Typed view of the front matter keys the extractor understands.

    Every field is optional. ``None`` means "not declared", which makes the
    extractor fall back to its inference rule for that field.
    """

    name: str | None = None
    description: str | None = None
    category: str | None = None
    tags: tuple[str, ...] | None = None
    priority: Priority | None = None
    estimated_tokens: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[object, object]) -> FrontMatterHeader:
        """Validate a loaded YAML mapping field by field."""
        return cls(
            name=_as_text(data.get("name")),
            description=_as_text(data.get("description")),
            category=_as_text(data.get("category")),
            tags=_as_tags(data.get("tags")),
            priority=Priority.from_value(data.get("priority")),
            estimated_tokens=_as_token_count(data.get("estimatedTokens")),
        )


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Separate a leading ``---`` fenced block from the body.

    Args:
        text: Full file content.

    Returns:
        ``(header_text, body)``. ``header_text`` is None when the file has
        no complete fenced block, in which case ``body`` is ``text``.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].lstrip(_BOM).rstrip() != _FENCE:
        return None, text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == _FENCE:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            return header, body
    return None, text


def parse_header(header_text: str) -> FrontMatterHeader:
    """Load and validate the YAML inside a front matter block.

    Args:
        header_text: Text between the two fences.

    Returns:
        The validated header. An empty block yields an all-None header.

    Raises:
        FrontMatterError: If the block is not valid YAML or is not a
            mapping.
    """
    try:
        data = yaml.safe_load(header_text)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid YAML front matter: {exc}") from exc

    if data is None:
        return FrontMatterHeader()
    if not isinstance(data, Mapping):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return FrontMatterHeader.from_mapping(data)


def _as_text(value: object) -> str | None:
    # bool is an int subclass; "name: yes" is not a name.
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _as_tags(value: object) -> tuple[str, ...] | None:
    if isinstance(value, str):
        items: list[object] = list(value.split(","))
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        return None
    tags = [tag for tag in (_as_text(item) for item in items) if tag]
    return tuple(tags)


def _as_token_count(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None
