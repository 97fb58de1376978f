"""Trigger phrase extraction.

Four sources feed one ordered, de-duplicated, lowercased list:
"Use when ..." clauses in the description, bullets under trigger sections,
"Use when ..." bullets anywhere in the body, and the "When to Use" column
of markdown tables.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from .frontmatter import strip_quotes
from .tools import iter_sections

MIN_TRIGGER_LENGTH = 8

TRIGGER_SECTION_RE = re.compile(
    r"^##[ \t]+(?:when[ \t]+to[ \t]+(?:use|activate)|triggers?)[ \t]*\r?$",
    re.IGNORECASE | re.MULTILINE,
)
_DESCRIPTION_USE_WHEN_RE = re.compile(r"Use when\b[^.;]*", re.IGNORECASE)
_SECTION_BULLET_RE = re.compile(r"^[ \t]*[-*][ \t]+(.+)", re.MULTILINE)
_USE_WHEN_BULLET_RE = re.compile(
    r"^[ \t]*[-*][ \t]+(Use when\b[^.\n]*)", re.IGNORECASE | re.MULTILINE
)
_TABLE_ROW_RE = re.compile(r"^\|.+\|[ \t]*\r?$", re.MULTILINE)
_SEPARATOR_ROW_RE = re.compile(r"^[\s|:-]+$")
_WHEN_TO_USE_RE = re.compile(r"when\s+to\s+use", re.IGNORECASE)
_TRAILING_PUNCT_RE = re.compile(r"[.,;]+$")
_TRAILING_NOISE_RE = re.compile(r"[.,;\s]+$")


def clean_trigger(text: str) -> str:
    """Trim, drop trailing ``.,;`` and lowercase. Empty when too short to be useful."""
    cleaned = _TRAILING_NOISE_RE.sub("", text.strip())
    if len(cleaned) <= MIN_TRIGGER_LENGTH:
        return ""
    return cleaned.lower()


def from_description(description: str) -> List[str]:
    return [m.group(0) for m in _DESCRIPTION_USE_WHEN_RE.finditer(description)]


def from_trigger_sections(body: str) -> List[str]:
    results: List[str] = []
    for section in iter_sections(body, TRIGGER_SECTION_RE):
        for match in _SECTION_BULLET_RE.finditer(section):
            results.append(strip_quotes(_TRAILING_PUNCT_RE.sub("", match.group(1).strip())))
    return results


def from_use_when_bullets(body: str) -> List[str]:
    return [m.group(1) for m in _USE_WHEN_BULLET_RE.finditer(body)]


def _cells(row: str) -> List[str]:
    return [cell.strip() for cell in row.strip().split("|")]


def from_when_to_use_table(body: str) -> List[str]:
    rows = [m.group(0).strip() for m in _TABLE_ROW_RE.finditer(body)]
    if len(rows) < 2:
        return []

    header = next((row for row in rows if _WHEN_TO_USE_RE.search(row)), None)
    if header is None:
        return []
    column = next(
        (i for i, cell in enumerate(_cells(header)) if _WHEN_TO_USE_RE.search(cell)),
        -1,
    )
    if column < 0:
        return []

    results: List[str] = []
    for row in rows:
        if row == header or _SEPARATOR_ROW_RE.match(row):
            continue
        cells = _cells(row)
        if column < len(cells) and cells[column]:
            results.append(cells[column].replace("**", ""))
    return results


def _dedupe(candidates: Iterable[str]) -> List[str]:
    seen: dict[str, None] = {}
    for candidate in candidates:
        cleaned = clean_trigger(candidate)
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def extract_triggers(description: str, body: str) -> List[str]:
    return _dedupe(
        [
            *from_description(description),
            *from_trigger_sections(body),
            *from_use_when_bullets(body),
            *from_when_to_use_table(body),
        ]
    )


__all__ = [
    "MIN_TRIGGER_LENGTH",
    "clean_trigger",
    "from_description",
    "from_trigger_sections",
    "from_use_when_bullets",
    "from_when_to_use_table",
    "extract_triggers",
]
