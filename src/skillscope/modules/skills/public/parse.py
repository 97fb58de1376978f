"""Skill document parsing.

``parse_skill_document`` is total over ``str``: malformed or missing front
matter degrades to empty fields and the name falls back to ``"Unknown"``.
"""

from __future__ import annotations

from ..internal import (
    extract_description,
    extract_scalar,
    extract_tools,
    extract_triggers,
    split_frontmatter,
)
from .types import ParsedSkill

UNKNOWN_NAME = "Unknown"
EMBEDDING_TEXT_SEPARATOR = " | "
INSTRUCTIONS_PREVIEW_CHARS = 500


def parse_skill_document(content: str) -> ParsedSkill:
    frontmatter, body = split_frontmatter(content)
    description = extract_description(frontmatter)

    return ParsedSkill(
        name=extract_scalar(frontmatter, "name") or UNKNOWN_NAME,
        description=description,
        full_instructions=body.strip(),
        tools_used=extract_tools(frontmatter, body),
        triggers=extract_triggers(description, body),
        raw_content=content,
    )


def build_embedding_text(parsed: ParsedSkill) -> str:
    """Name, description and an instructions preview, empty parts skipped."""
    parts = [
        parsed.name,
        parsed.description,
        parsed.full_instructions[:INSTRUCTIONS_PREVIEW_CHARS],
    ]
    return EMBEDDING_TEXT_SEPARATOR.join(part for part in parts if part)


__all__ = [
    "UNKNOWN_NAME",
    "parse_skill_document",
    "build_embedding_text",
]
