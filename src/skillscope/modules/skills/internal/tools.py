"""Tool extraction layers.

Each layer returns raw candidate tokens; ``ToolAccumulator`` folds them into
one ordered, case-folded, de-duplicated set and drops stop words.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from .frontmatter import extract_array, extract_bins

# Words that show up in tool positions but are generic or structural.
TOOL_STOP_WORDS = frozenset(
    {
        "the", "and", "for", "with", "this", "that", "from", "your", "use",
        "when", "how", "what", "which", "where", "will", "can", "should",
        "must", "not", "are", "was", "been", "has", "have", "had", "does",
        "did", "but", "its", "all", "any", "our", "you", "see", "also",
        "each", "more", "most", "other", "some", "such", "than", "too",
        "very", "just", "into", "over", "only", "after", "before", "about",
        "key", "new", "set", "get", "run", "add", "yes", "required",
        "optional", "default", "true", "false", "null", "none", "note",
        "example", "usage", "install", "command", "description", "name",
        "version", "string", "number", "boolean", "object", "array", "file",
        "files", "path", "paths", "value", "values", "type", "types",
        "list", "item", "items", "data", "text", "step", "steps",
        "platform", "macos", "linux", "windows", "category",
        "setting", "settings", "guide", "topic", "reference", "level",
        "tool", "tools", "dependency", "dependencies", "requirement",
        "requirements", "integration", "integrations", "prerequisite",
        "prerequisites", "purpose", "notes",
    }
)

TOOL_SECTION_RE = re.compile(
    r"^##[ \t]+(?:tools|dependencies|requirements|integrations|prerequisites"
    r"|system[ \t]+dependencies)[ \t]*\r?$",
    re.IGNORECASE | re.MULTILINE,
)
_BULLET_RE = re.compile(
    r"^[ \t]*[-*][ \t]+(?:\*\*([^*\n]+)\*\*|`([^`\n]+)`|(\w[\w-]*)[ \t]*[:\-—])",
    re.MULTILINE,
)
_TABLE_ROW_RE = re.compile(
    r"^\|[ \t]*(?:\*\*([^*|\n]+)\*\*|`([^`|\n]+)`|([^|\s][^|\n]*))[ \t]*\|",
    re.MULTILINE,
)
_LEGACY_RE = re.compile(
    r"(?:tools?|requires?|integrates?\s+with):\s*[`\"]?(\w[\w-]*)[`\"]?",
    re.IGNORECASE,
)


class ToolAccumulator:
    """Ordered, de-duplicated, lowercased tool set with stop-word filtering."""

    def __init__(self):
        self._items: dict[str, None] = {}

    def add(self, candidates: Iterable[str]) -> None:
        for candidate in candidates:
            token = candidate.strip().lower()
            if not token or token in TOOL_STOP_WORDS or "---" in token:
                continue
            self._items.setdefault(token, None)

    def to_list(self) -> List[str]:
        return list(self._items)


def iter_sections(body: str, heading: re.Pattern) -> Iterable[str]:
    """Yield the text under each level-2 heading matching ``heading``."""
    for match in heading.finditer(body):
        start = match.end()
        end = body.find("\n## ", start)
        yield body[start:] if end == -1 else body[start:end]


def _first_group(match: re.Match) -> str:
    return next((g for g in match.groups() if g is not None), "").strip()


def extract_section_tools(body: str) -> List[str]:
    """Bullets and first table cells inside Tools/Dependencies/Requirements-style sections."""
    results: List[str] = []
    for section in iter_sections(body, TOOL_SECTION_RE):
        results.extend(_first_group(m) for m in _BULLET_RE.finditer(section))
        results.extend(_first_group(m) for m in _TABLE_ROW_RE.finditer(section))
    return results


def extract_legacy_tools(body: str) -> List[str]:
    """``tools: x`` / ``requires: x`` / ``integrates with: x`` anywhere in the body."""
    return [m.group(1) for m in _LEGACY_RE.finditer(body)]


def extract_tools(frontmatter: str, body: str) -> List[str]:
    tools = ToolAccumulator()
    tools.add(extract_array(frontmatter, "tools"))
    tools.add(extract_array(frontmatter, "tags"))
    tools.add(extract_bins(frontmatter))
    tools.add(extract_section_tools(body))
    tools.add(extract_legacy_tools(body))
    return tools.to_list()


__all__ = [
    "TOOL_STOP_WORDS",
    "ToolAccumulator",
    "iter_sections",
    "extract_section_tools",
    "extract_legacy_tools",
    "extract_tools",
]
